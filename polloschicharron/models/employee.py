"""employees table."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from polloschicharron.core.database import Base


class EmployeeRecord(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
