"""Read-only projections assembled for display, never persisted."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class EstablishmentProjection:
    name: str | None
    tax_id: str


@dataclass(frozen=True)
class OrderProjection:
    """Flattened order row: establishment name, employee display name, status label."""

    id: int
    timestamp: datetime
    establishment: str | None
    employee: str | None
    status: str


@dataclass(frozen=True)
class ProductProjection:
    name: str
    family: str | None
    price: float
