"""FamilyDAO — families table operations."""

from polloschicharron.dao.base import BaseDAO
from polloschicharron.models.family import FamilyRecord


class FamilyDAO(BaseDAO[FamilyRecord]):
    model = FamilyRecord
