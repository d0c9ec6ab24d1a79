"""establishments table."""

from typing import Optional

from sqlalchemy import Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from polloschicharron.core.database import Base


class EstablishmentRecord(Base):
    __tablename__ = "establishments"

    tax_id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(Text)
    phone: Mapped[Optional[str]] = mapped_column(Text)
    email: Mapped[Optional[str]] = mapped_column(Text)

    # address (flattened)
    address_street: Mapped[Optional[str]] = mapped_column(Text)
    address_city: Mapped[Optional[str]] = mapped_column(Text)
    address_postal_code: Mapped[Optional[str]] = mapped_column(Text)
    address_province: Mapped[Optional[str]] = mapped_column(Text)
    address_country: Mapped[Optional[str]] = mapped_column(Text)

    __table_args__ = (Index("idx_establishments_province", "address_province"),)
