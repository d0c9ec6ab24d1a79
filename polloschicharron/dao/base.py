"""Generic base DAO — lookup, existence, listing, save and count."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy import exists as sa_exists
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.core.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseDAO(Generic[ModelT]):
    """Base data-access object. Subclasses set ``model`` class attribute.

    Primary keys may be natural (establishment tax id) or surrogate
    (autoincrement integer); the key column is read from the mapper.
    """

    model: type[ModelT]

    @staticmethod
    def _require_pk(pk: Any) -> None:
        """Raise ValueError if *pk* is None."""
        if pk is None:
            raise ValueError("pk must not be None")

    @property
    def _pk_column(self):
        return self.model.__mapper__.primary_key[0]

    async def get_by_id(self, session: AsyncSession, pk: Any) -> ModelT | None:
        self._require_pk(pk)
        return await session.get(self.model, pk)

    async def exists(self, session: AsyncSession, pk: Any) -> bool:
        """Check existence without loading the full ORM object."""
        self._require_pk(pk)
        stmt = select(sa_exists().where(self._pk_column == pk))
        result = await session.execute(stmt)
        return result.scalar_one()

    async def list_all(self, session: AsyncSession) -> list[ModelT]:
        result = await session.execute(select(self.model).order_by(self._pk_column))
        return list(result.scalars().all())

    async def save(self, session: AsyncSession, obj: ModelT) -> ModelT:
        """Insert *obj* when its primary key is unset, replace the stored row otherwise.

        Returns the persistent instance; generated keys are populated after
        the flush. *obj* itself is left untouched.
        """
        merged = await session.merge(obj)
        await session.flush()
        return merged

    async def count(self, session: AsyncSession) -> int:
        """Return the total number of rows."""
        query = select(func.count()).select_from(self.model.__table__)
        result = await session.execute(query)
        return result.scalar_one()
