"""orders table."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, Text, desc
from sqlalchemy.orm import Mapped, mapped_column

from polloschicharron.core.database import Base
from polloschicharron.domain.order import OrderStatus

order_status_enum = Enum(
    OrderStatus,
    name="order_status",
    values_callable=lambda members: [m.value for m in members],
)


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    establishment_tax_id: Mapped[Optional[str]] = mapped_column(
        Text, ForeignKey("establishments.tax_id")
    )
    employee_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("employees.id"))
    status: Mapped[OrderStatus] = mapped_column(
        order_status_enum, nullable=False, default=OrderStatus.NEW
    )

    __table_args__ = (
        Index("idx_orders_timestamp", desc("timestamp")),
        Index("idx_orders_establishment", "establishment_tax_id"),
    )
