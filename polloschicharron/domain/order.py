"""Order — placed at an establishment and handled by an employee."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone


class OrderStatus(str, enum.Enum):
    NEW = "new"
    IN_PREPARATION = "in_preparation"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    OrderStatus.NEW: "New",
    OrderStatus.IN_PREPARATION: "In preparation",
    OrderStatus.READY: "Ready for delivery",
    OrderStatus.DELIVERED: "Delivered",
    OrderStatus.CANCELLED: "Cancelled",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    id: int | None = None
    timestamp: datetime = field(default_factory=_utcnow)
    notes: str | None = None
    establishment_tax_id: str | None = None
    employee_id: int | None = None
    status: OrderStatus = OrderStatus.NEW
