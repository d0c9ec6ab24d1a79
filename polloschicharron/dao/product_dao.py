"""ProductDAO — products table operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.dao.base import BaseDAO
from polloschicharron.models.family import FamilyRecord
from polloschicharron.models.product import ProductRecord


class ProductDAO(BaseDAO[ProductRecord]):
    model = ProductRecord

    async def save(self, session: AsyncSession, obj: ProductRecord) -> ProductRecord:
        """Save, then reload ``family`` so it matches the flushed ``family_id``."""
        merged = await super().save(session, obj)
        await session.refresh(merged, ["family"])
        return merged

    async def list_projection_rows(
        self, session: AsyncSession
    ) -> list[tuple[str, str | None, float]]:
        """Raw ``(name, family name, price)`` rows, one per product, in that column order."""
        stmt = (
            select(ProductRecord.name, FamilyRecord.name, ProductRecord.price)
            .outerjoin(FamilyRecord, ProductRecord.family_id == FamilyRecord.id)
            .order_by(ProductRecord.id)
        )
        result = await session.execute(stmt)
        return [tuple(row) for row in result.all()]
