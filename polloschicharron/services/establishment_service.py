"""EstablishmentService — establishments keyed by tax id."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from polloschicharron.dao.establishment_dao import EstablishmentDAO
from polloschicharron.domain import Establishment, EstablishmentProjection
from polloschicharron.mappers import to_establishment, to_establishment_record
from polloschicharron.services import InvalidStateError

log = structlog.get_logger("polloschicharron.services")


class EstablishmentService:
    """Stateless service for establishment CRUD and province lookups."""

    def __init__(self, establishment_dao: EstablishmentDAO) -> None:
        self._establishment_dao = establishment_dao

    async def create(self, session: AsyncSession, establishment: Establishment) -> str:
        """Persist a new establishment and return its tax id.

        Raises :class:`InvalidStateError` if the tax id is missing or already taken.
        """
        tax_id = establishment.tax_id
        if tax_id is None or await self._establishment_dao.exists(session, tax_id):
            shown = "null" if tax_id is None else tax_id
            log.warning("establishment.create_rejected", tax_id=tax_id)
            raise InvalidStateError(f"tax id [{shown}] is not valid or already exists")

        await self._establishment_dao.save(session, to_establishment_record(establishment))
        log.info("establishment.created", tax_id=tax_id)
        return tax_id

    async def read(self, session: AsyncSession, tax_id: str) -> Establishment | None:
        record = await self._establishment_dao.get_by_id(session, tax_id)
        return to_establishment(record) if record is not None else None

    async def update(self, session: AsyncSession, establishment: Establishment) -> None:
        """Replace the stored establishment.

        Raises :class:`InvalidStateError` if no establishment has that tax id.
        """
        tax_id = establishment.tax_id
        if tax_id is None or not await self._establishment_dao.exists(session, tax_id):
            log.warning("establishment.update_rejected", tax_id=tax_id)
            raise InvalidStateError(f"establishment with tax id [{tax_id}] does not exist")

        await self._establishment_dao.save(session, to_establishment_record(establishment))
        log.info("establishment.updated", tax_id=tax_id)

    async def get_all(self, session: AsyncSession) -> list[Establishment]:
        records = await self._establishment_dao.list_all(session)
        return [to_establishment(r) for r in records]

    async def get_by_province(self, session: AsyncSession, name: str) -> list[Establishment]:
        """Return establishments whose province equals *name*, ignoring case."""
        records = await self._establishment_dao.list_by_province(session, name)
        return [to_establishment(r) for r in records]

    async def get_establishments_projection(
        self, session: AsyncSession
    ) -> list[EstablishmentProjection]:
        return await self._establishment_dao.list_projection(session)
