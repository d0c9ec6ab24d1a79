"""SQLAlchemy ORM models — one file per table."""

from polloschicharron.models.employee import EmployeeRecord
from polloschicharron.models.establishment import EstablishmentRecord
from polloschicharron.models.family import FamilyRecord
from polloschicharron.models.order import OrderRecord
from polloschicharron.models.product import ProductRecord

__all__ = [
    "EmployeeRecord",
    "EstablishmentRecord",
    "FamilyRecord",
    "OrderRecord",
    "ProductRecord",
]
