"""Family — product category."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Family:
    """``id`` is assigned by the database; it is None until the family is created."""

    id: int | None = None
    name: str | None = None
