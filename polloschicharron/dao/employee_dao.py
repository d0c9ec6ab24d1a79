"""EmployeeDAO — employees table operations."""

from polloschicharron.dao.base import BaseDAO
from polloschicharron.models.employee import EmployeeRecord


class EmployeeDAO(BaseDAO[EmployeeRecord]):
    model = EmployeeRecord
