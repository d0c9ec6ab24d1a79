"""Product — an item of the catalog, soft-deleted by delisting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from polloschicharron.domain.family import Family


@dataclass
class Product:
    """A catalog product.

    Lifecycle: a product is created listed and can be updated any number of
    times until it is delisted. Delisting is the terminal state; the row stays
    in storage and remains readable.
    """

    id: int | None = None
    name: str | None = None
    price: float | None = None
    created_on: date = field(default_factory=date.today)
    description: str | None = None
    family: Family | None = None
    delisted: bool = False

    def delist(self) -> None:
        """Existing -> Delisted. Delisting an already delisted product is a no-op."""
        self.delisted = True
