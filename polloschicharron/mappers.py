"""Business model <-> persistence model conversion.

One pure function per entity and direction. Every field is copied explicitly
and nested values (address, family) are rebuilt, so a business object never
shares mutable state with the ORM row it came from or is saved as.
"""

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.orm.base import NO_VALUE

from polloschicharron.domain import Address, Establishment, Family, Order, Product
from polloschicharron.models import (
    EstablishmentRecord,
    FamilyRecord,
    OrderRecord,
    ProductRecord,
)

# ── establishment ────────────────────────────────────────────────────────


def to_establishment(record: EstablishmentRecord) -> Establishment:
    return Establishment(
        tax_id=record.tax_id,
        name=record.name,
        phone=record.phone,
        email=record.email,
        address=Address(
            street=record.address_street,
            city=record.address_city,
            postal_code=record.address_postal_code,
            province=record.address_province,
            country=record.address_country,
        ),
    )


def to_establishment_record(establishment: Establishment) -> EstablishmentRecord:
    address = establishment.address or Address()
    return EstablishmentRecord(
        tax_id=establishment.tax_id,
        name=establishment.name,
        phone=establishment.phone,
        email=establishment.email,
        address_street=address.street,
        address_city=address.city,
        address_postal_code=address.postal_code,
        address_province=address.province,
        address_country=address.country,
    )


# ── family ───────────────────────────────────────────────────────────────


def to_family(record: FamilyRecord) -> Family:
    return Family(id=record.id, name=record.name)


def to_family_record(family: Family) -> FamilyRecord:
    return FamilyRecord(id=family.id, name=family.name)


# ── order ────────────────────────────────────────────────────────────────


def to_order(record: OrderRecord) -> Order:
    return Order(
        id=record.id,
        timestamp=record.timestamp,
        notes=record.notes,
        establishment_tax_id=record.establishment_tax_id,
        employee_id=record.employee_id,
        status=record.status,
    )


def to_order_record(order: Order) -> OrderRecord:
    return OrderRecord(
        id=order.id,
        timestamp=order.timestamp,
        notes=order.notes,
        establishment_tax_id=order.establishment_tax_id,
        employee_id=order.employee_id,
        status=order.status,
    )


# ── product ──────────────────────────────────────────────────────────────


def to_product(record: ProductRecord) -> Product:
    # Never touch an unloaded relationship: async sessions cannot lazy-load.
    family_record = inspect(record).attrs.family.loaded_value
    if family_record is not NO_VALUE and family_record is not None:
        family = to_family(family_record)
    elif record.family_id is not None:
        family = Family(id=record.family_id)
    else:
        family = None
    return Product(
        id=record.id,
        name=record.name,
        price=record.price,
        created_on=record.created_on,
        description=record.description,
        family=family,
        delisted=bool(record.delisted),
    )


def to_product_record(product: Product) -> ProductRecord:
    """Only the family foreign key is carried; the family row is never written."""
    return ProductRecord(
        id=product.id,
        name=product.name,
        price=product.price,
        created_on=product.created_on,
        description=product.description,
        family_id=product.family.id if product.family is not None else None,
        delisted=product.delisted,
    )
