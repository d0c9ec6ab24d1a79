"""FamilyService — product categories."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.dao.family_dao import FamilyDAO
from polloschicharron.domain import Family
from polloschicharron.mappers import to_family, to_family_record
from polloschicharron.services import InvalidStateError

log = structlog.get_logger("polloschicharron.services")


class FamilyService:
    """Stateless service for family CRUD."""

    def __init__(self, family_dao: FamilyDAO) -> None:
        self._family_dao = family_dao

    async def create(self, session: AsyncSession, family: Family) -> int:
        """Persist a new family and return the id assigned by the database.

        The caller's object is not modified. Raises :class:`InvalidStateError`
        if ``family.id`` is already set.
        """
        if family.id is not None:
            log.warning("family.create_rejected", family_id=family.id)
            raise InvalidStateError("id must be null to create a family")

        saved = await self._family_dao.save(session, to_family_record(family))
        log.info("family.created", family_id=saved.id)
        return saved.id

    async def read(self, session: AsyncSession, family_id: int) -> Family | None:
        record = await self._family_dao.get_by_id(session, family_id)
        return to_family(record) if record is not None else None

    async def update(self, session: AsyncSession, family: Family) -> None:
        """Replace the stored family.

        Raises :class:`InvalidStateError` if no family has that id.
        """
        if family.id is None or not await self._family_dao.exists(session, family.id):
            log.warning("family.update_rejected", family_id=family.id)
            raise InvalidStateError(f"family with id [{family.id}] does not exist")

        await self._family_dao.save(session, to_family_record(family))
        log.info("family.updated", family_id=family.id)

    async def get_all(self, session: AsyncSession) -> list[Family]:
        records = await self._family_dao.list_all(session)
        return [to_family(r) for r in records]
