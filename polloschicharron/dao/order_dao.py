"""OrderDAO — orders table operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.dao.base import BaseDAO
from polloschicharron.domain.projections import OrderProjection
from polloschicharron.models.employee import EmployeeRecord
from polloschicharron.models.establishment import EstablishmentRecord
from polloschicharron.models.order import OrderRecord


def _display_name(first_name: str | None, last_name: str | None) -> str | None:
    """``"<last name>, <first name>"``, or whichever part is present."""
    if first_name and last_name:
        return f"{last_name}, {first_name}"
    return last_name or first_name or None


class OrderDAO(BaseDAO[OrderRecord]):
    model = OrderRecord

    async def list_projection(self, session: AsyncSession) -> list[OrderProjection]:
        """Flattened order rows joined with establishment and employee names.

        Outer joins: an order without establishment or employee still yields a row.
        """
        stmt = (
            select(
                OrderRecord.id,
                OrderRecord.timestamp,
                EstablishmentRecord.name.label("establishment_name"),
                EmployeeRecord.first_name,
                EmployeeRecord.last_name,
                OrderRecord.status,
            )
            .outerjoin(
                EstablishmentRecord,
                OrderRecord.establishment_tax_id == EstablishmentRecord.tax_id,
            )
            .outerjoin(EmployeeRecord, OrderRecord.employee_id == EmployeeRecord.id)
            .order_by(OrderRecord.id)
        )
        result = await session.execute(stmt)
        return [
            OrderProjection(
                id=row.id,
                timestamp=row.timestamp,
                establishment=row.establishment_name,
                employee=_display_name(row.first_name, row.last_name),
                status=row.status.label,
            )
            for row in result
        ]
