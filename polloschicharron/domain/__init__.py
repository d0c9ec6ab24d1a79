"""Business model — the entity shapes used by service callers."""

from polloschicharron.domain.establishment import Address, Establishment
from polloschicharron.domain.family import Family
from polloschicharron.domain.order import Order, OrderStatus
from polloschicharron.domain.product import Product
from polloschicharron.domain.projections import (
    EstablishmentProjection,
    OrderProjection,
    ProductProjection,
)

__all__ = [
    "Address",
    "Establishment",
    "Family",
    "Order",
    "OrderStatus",
    "Product",
    "EstablishmentProjection",
    "OrderProjection",
    "ProductProjection",
]
