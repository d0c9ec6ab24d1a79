"""Create the schema and load a demo catalog into the database.

1. Create all tables (idempotent)
2. Register establishments, families and products through the services
3. Place one order per establishment and print the order / product listings
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv(ROOT / ".env")

import structlog

from polloschicharron.core.database import (
    Base,
    dispose_engine,
    get_engine,
    init_session_factory,
    session_scope,
)
from polloschicharron.core.logging import setup_logging
from polloschicharron.deps import (
    get_employee_dao,
    get_establishment_service,
    get_family_service,
    get_order_service,
    get_product_service,
)
from polloschicharron.domain import Address, Establishment, Family, Order, Product
from polloschicharron.models import EmployeeRecord
from polloschicharron.services import InvalidStateError

log = structlog.get_logger("polloschicharron.seed")

ESTABLISHMENTS = [
    Establishment(
        tax_id="B12345678",
        name="Pollos Chicharrón Centro",
        phone="910000001",
        address=Address(street="Gran Vía 1", city="Madrid", province="Madrid", country="ES"),
    ),
    Establishment(
        tax_id="B87654321",
        name="Pollos Chicharrón Diagonal",
        phone="930000002",
        address=Address(
            street="Av. Diagonal 200", city="Barcelona", province="Barcelona", country="ES"
        ),
    ),
]

CATALOG = {
    "Pollos": [("Pollo asado", 12.5), ("Medio pollo", 7.0)],
    "Bebidas": [("Agua", 1.5), ("Refresco", 2.2)],
}


async def main() -> None:
    setup_logging()
    init_session_factory()

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    establishments = get_establishment_service()
    families = get_family_service()
    products = get_product_service()
    orders = get_order_service()

    async with session_scope() as session:
        for establishment in ESTABLISHMENTS:
            try:
                await establishments.create(session, establishment)
            except InvalidStateError as exc:
                log.info("seed.skip", reason=str(exc))

        for family_name, items in CATALOG.items():
            family_id = await families.create(session, Family(name=family_name))
            for name, price in items:
                await products.create(
                    session,
                    Product(name=name, price=price, family=Family(id=family_id)),
                )

        employee = await get_employee_dao().save(
            session, EmployeeRecord(first_name="Pepín", last_name="Gálvez Ridruejo")
        )
        for establishment in ESTABLISHMENTS:
            await orders.create(
                session,
                Order(
                    notes="demo order",
                    establishment_tax_id=establishment.tax_id,
                    employee_id=employee.id,
                ),
            )

    async with session_scope() as session:
        for row in await orders.get_orders_projection(session):
            print(f"  order {row.id}: {row.establishment} / {row.employee} / {row.status}")
        for row in await products.get_products_projection(session):
            print(f"  {row.name:<15} {row.family or '-':<10} {row.price:>6.2f}")
        total = await products.get_number_of_products(session)

    print(f"Done: {total} products in catalog.")
    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
