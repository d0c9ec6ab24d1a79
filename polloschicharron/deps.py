"""Dependency wiring — DAO and service singletons."""

from __future__ import annotations

from polloschicharron.dao.employee_dao import EmployeeDAO
from polloschicharron.dao.establishment_dao import EstablishmentDAO
from polloschicharron.dao.family_dao import FamilyDAO
from polloschicharron.dao.order_dao import OrderDAO
from polloschicharron.dao.product_dao import ProductDAO
from polloschicharron.services.establishment_service import EstablishmentService
from polloschicharron.services.family_service import FamilyService
from polloschicharron.services.order_service import OrderService
from polloschicharron.services.product_service import ProductService

# ---------------------------------------------------------------------------
# DAO singletons
# ---------------------------------------------------------------------------
_employee_dao = EmployeeDAO()
_establishment_dao = EstablishmentDAO()
_family_dao = FamilyDAO()
_order_dao = OrderDAO()
_product_dao = ProductDAO()

# ---------------------------------------------------------------------------
# Service singletons
# ---------------------------------------------------------------------------
_establishment_service = EstablishmentService(_establishment_dao)
_family_service = FamilyService(_family_dao)
_order_service = OrderService(_order_dao)
_product_service = ProductService(_product_dao)


def get_employee_dao() -> EmployeeDAO:
    return _employee_dao


def get_establishment_service() -> EstablishmentService:
    return _establishment_service


def get_family_service() -> FamilyService:
    return _family_service


def get_order_service() -> OrderService:
    return _order_service


def get_product_service() -> ProductService:
    return _product_service
