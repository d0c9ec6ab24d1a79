"""EstablishmentDAO — establishments table operations."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.dao.base import BaseDAO
from polloschicharron.domain.projections import EstablishmentProjection
from polloschicharron.models.establishment import EstablishmentRecord


class EstablishmentDAO(BaseDAO[EstablishmentRecord]):
    model = EstablishmentRecord

    async def list_by_province(
        self, session: AsyncSession, province: str
    ) -> list[EstablishmentRecord]:
        """Exact, case-insensitive match on the address province."""
        stmt = (
            select(EstablishmentRecord)
            .where(func.lower(EstablishmentRecord.address_province) == province.lower())
            .order_by(EstablishmentRecord.tax_id)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def list_projection(self, session: AsyncSession) -> list[EstablishmentProjection]:
        stmt = select(EstablishmentRecord.name, EstablishmentRecord.tax_id).order_by(
            EstablishmentRecord.name
        )
        result = await session.execute(stmt)
        return [EstablishmentProjection(name=row.name, tax_id=row.tax_id) for row in result]
