"""products table."""

from datetime import date
from typing import Optional

from sqlalchemy import Boolean, Date, Float, ForeignKey, Index, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from polloschicharron.core.database import Base
from polloschicharron.models.family import FamilyRecord


class ProductRecord(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(Text)
    price: Mapped[Optional[float]] = mapped_column(Float)
    created_on: Mapped[Optional[date]] = mapped_column(Date)
    description: Mapped[Optional[str]] = mapped_column(Text)
    family_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("families.id"))
    delisted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    # selectin: async sessions cannot lazy-load on attribute access
    family: Mapped[Optional[FamilyRecord]] = relationship(lazy="selectin")

    __table_args__ = (Index("idx_products_family", "family_id"),)
