"""OrderService — orders and the flattened order listing."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.dao.order_dao import OrderDAO
from polloschicharron.domain import Order, OrderProjection
from polloschicharron.mappers import to_order, to_order_record
from polloschicharron.services import InvalidStateError

log = structlog.get_logger("polloschicharron.services")


class OrderService:
    """Stateless service for order CRUD."""

    def __init__(self, order_dao: OrderDAO) -> None:
        self._order_dao = order_dao

    async def create(self, session: AsyncSession, order: Order) -> int:
        """Persist a new order and return its id.

        Raises :class:`InvalidStateError` if ``order.id`` is already set.
        """
        if order.id is not None:
            log.warning("order.create_rejected", order_id=order.id)
            raise InvalidStateError("id must be null to create an order")

        saved = await self._order_dao.save(session, to_order_record(order))
        log.info("order.created", order_id=saved.id, status=order.status.value)
        return saved.id

    async def read(self, session: AsyncSession, order_id: int) -> Order | None:
        record = await self._order_dao.get_by_id(session, order_id)
        return to_order(record) if record is not None else None

    async def update(self, session: AsyncSession, order: Order) -> None:
        """Replace the stored order.

        Raises :class:`InvalidStateError` if no order has that id.
        """
        if order.id is None or not await self._order_dao.exists(session, order.id):
            log.warning("order.update_rejected", order_id=order.id)
            raise InvalidStateError(f"order with id [{order.id}] does not exist")

        await self._order_dao.save(session, to_order_record(order))
        log.info("order.updated", order_id=order.id, status=order.status.value)

    async def get_all(self, session: AsyncSession) -> list[Order]:
        records = await self._order_dao.list_all(session)
        return [to_order(r) for r in records]

    async def get_orders_projection(self, session: AsyncSession) -> list[OrderProjection]:
        """Return one flattened row per order, straight from the projection query."""
        return await self._order_dao.list_projection(session)
