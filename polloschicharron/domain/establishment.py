"""Establishment — a restaurant of the chain, keyed by its tax id."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Address:
    street: str | None = None
    city: str | None = None
    postal_code: str | None = None
    province: str | None = None
    country: str | None = None


@dataclass
class Establishment:
    tax_id: str | None = None
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: Address = field(default_factory=Address)
