"""ProductService — catalog products, soft delete and listings."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.dao.product_dao import ProductDAO
from polloschicharron.domain import Product, ProductProjection
from polloschicharron.mappers import to_product, to_product_record
from polloschicharron.services import InvalidStateError

log = structlog.get_logger("polloschicharron.services")


class ProductService:
    """Stateless service for product CRUD.

    Products are never physically removed: :meth:`delete` delists them.
    """

    def __init__(self, product_dao: ProductDAO) -> None:
        self._product_dao = product_dao

    async def create(self, session: AsyncSession, product: Product) -> int:
        """Persist a new product and return its id.

        Raises :class:`InvalidStateError` if ``product.id`` is already set.
        """
        if product.id is not None:
            log.warning("product.create_rejected", product_id=product.id)
            raise InvalidStateError("id must be null to create a product")

        saved = await self._product_dao.save(session, to_product_record(product))
        log.info("product.created", product_id=saved.id)
        return saved.id

    async def read(self, session: AsyncSession, product_id: int) -> Product | None:
        """Return the product, delisted or not, or None."""
        record = await self._product_dao.get_by_id(session, product_id)
        return to_product(record) if record is not None else None

    async def update(self, session: AsyncSession, product: Product) -> None:
        """Replace the stored product.

        A delisted product stays delisted whatever ``product.delisted`` says.

        Raises :class:`InvalidStateError` if no product has that id.
        """
        stored = None
        if product.id is not None:
            stored = await self._product_dao.get_by_id(session, product.id)
        if stored is None:
            log.warning("product.update_rejected", product_id=product.id)
            raise InvalidStateError(f"product with id [{product.id}] does not exist")

        record = to_product_record(product)
        if stored.delisted:
            record.delisted = True
        await self._product_dao.save(session, record)
        log.info("product.updated", product_id=product.id, delisted=record.delisted)

    async def delete(self, session: AsyncSession, product_id: int) -> None:
        """Soft delete: load the product, delist it and save it back.

        Raises :class:`InvalidStateError` if no product has that id.
        """
        record = await self._product_dao.get_by_id(session, product_id)
        if record is None:
            log.warning("product.delete_rejected", product_id=product_id)
            raise InvalidStateError(f"product with id [{product_id}] does not exist")

        product = to_product(record)
        product.delist()
        await self._product_dao.save(session, to_product_record(product))
        log.info("product.delisted", product_id=product_id)

    async def get_all(self, session: AsyncSession) -> list[Product]:
        records = await self._product_dao.list_all(session)
        return [to_product(r) for r in records]

    async def get_number_of_products(self, session: AsyncSession) -> int:
        """Total number of stored products, delisted ones included."""
        return int(await self._product_dao.count(session))

    async def get_products_projection(self, session: AsyncSession) -> list[ProductProjection]:
        """Build name / family / price rows from the raw projection tuples."""
        rows = await self._product_dao.list_projection_rows(session)
        return [
            ProductProjection(name=name, family=family, price=price)
            for name, family, price in rows
        ]
