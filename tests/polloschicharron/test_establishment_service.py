"""Tests for EstablishmentService."""

from unittest.mock import AsyncMock

import pytest

from polloschicharron.dao.establishment_dao import EstablishmentDAO
from polloschicharron.domain import Address, Establishment, EstablishmentProjection
from polloschicharron.models import EstablishmentRecord
from polloschicharron.services import InvalidStateError
from polloschicharron.services.establishment_service import EstablishmentService

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_establishment(**overrides) -> Establishment:
    defaults = {
        "tax_id": "123456789",
        "name": "Pollos Chicharrón Centro",
        "phone": "910000001",
        "email": "centro@polloschicharron.es",
        "address": Address(
            street="Gran Vía 1",
            city="Madrid",
            postal_code="28013",
            province="Madrid",
            country="ES",
        ),
    }
    defaults.update(overrides)
    return Establishment(**defaults)


def _make_record(**overrides) -> EstablishmentRecord:
    defaults = {
        "tax_id": "123456789",
        "name": "Pollos Chicharrón Centro",
        "phone": "910000001",
        "email": "centro@polloschicharron.es",
        "address_street": "Gran Vía 1",
        "address_city": "Madrid",
        "address_postal_code": "28013",
        "address_province": "Madrid",
        "address_country": "ES",
    }
    defaults.update(overrides)
    return EstablishmentRecord(**defaults)


def _make_service() -> tuple[EstablishmentService, EstablishmentDAO]:
    dao = EstablishmentDAO()
    dao.exists = AsyncMock(return_value=False)
    dao.save = AsyncMock(side_effect=lambda _s, record: record)
    return EstablishmentService(dao), dao


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


class TestCreate:
    async def test_create_saves_mapped_record(self):
        service, dao = _make_service()

        tax_id = await service.create(AsyncMock(), _make_establishment())

        assert tax_id == "123456789"
        dao.exists.assert_awaited_once()
        saved = dao.save.call_args[0][1]
        assert isinstance(saved, EstablishmentRecord)
        assert saved.tax_id == "123456789"
        assert saved.name == "Pollos Chicharrón Centro"
        assert saved.address_province == "Madrid"
        assert saved.address_postal_code == "28013"

    async def test_create_null_tax_id(self):
        service, dao = _make_service()

        with pytest.raises(InvalidStateError) as exc_info:
            await service.create(AsyncMock(), _make_establishment(tax_id=None))

        assert str(exc_info.value) == "tax id [null] is not valid or already exists"
        dao.exists.assert_not_awaited()
        dao.save.assert_not_awaited()

    async def test_create_existing_tax_id(self):
        service, dao = _make_service()
        dao.exists = AsyncMock(return_value=True)

        with pytest.raises(InvalidStateError) as exc_info:
            await service.create(AsyncMock(), _make_establishment())

        assert str(exc_info.value) == "tax id [123456789] is not valid or already exists"
        dao.save.assert_not_awaited()


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------


class TestRead:
    async def test_read_found(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=_make_record())

        result = await service.read(AsyncMock(), "123456789")

        assert result is not None
        assert result.tax_id == "123456789"
        assert result.address.city == "Madrid"

    async def test_read_unknown_returns_none(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=None)

        assert await service.read(AsyncMock(), "999999999") is None


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


class TestUpdate:
    async def test_update_existing(self):
        service, dao = _make_service()
        dao.exists = AsyncMock(return_value=True)

        await service.update(AsyncMock(), _make_establishment(name="Renamed"))

        dao.save.assert_awaited_once()
        assert dao.save.call_args[0][1].name == "Renamed"

    async def test_update_unknown(self):
        service, dao = _make_service()
        dao.exists = AsyncMock(return_value=False)

        with pytest.raises(InvalidStateError) as exc_info:
            await service.update(AsyncMock(), _make_establishment())

        assert str(exc_info.value) == "establishment with tax id [123456789] does not exist"
        dao.save.assert_not_awaited()

    async def test_update_null_tax_id(self):
        service, dao = _make_service()

        with pytest.raises(InvalidStateError):
            await service.update(AsyncMock(), _make_establishment(tax_id=None))

        dao.exists.assert_not_awaited()
        dao.save.assert_not_awaited()


# ---------------------------------------------------------------------------
# listings
# ---------------------------------------------------------------------------


class TestListings:
    async def test_get_all(self):
        service, dao = _make_service()
        dao.list_all = AsyncMock(
            return_value=[_make_record(), _make_record(tax_id="987654321")]
        )

        result = await service.get_all(AsyncMock())

        assert len(result) == 2
        assert {e.tax_id for e in result} == {"123456789", "987654321"}

    async def test_get_all_empty(self):
        service, dao = _make_service()
        dao.list_all = AsyncMock(return_value=[])

        assert await service.get_all(AsyncMock()) == []

    async def test_get_by_province(self):
        service, dao = _make_service()
        dao.list_by_province = AsyncMock(
            return_value=[_make_record(), _make_record(tax_id="987654321")]
        )

        result = await service.get_by_province(AsyncMock(), "Madrid")

        assert [e.tax_id for e in result] == ["123456789", "987654321"]
        assert dao.list_by_province.call_args[0][1] == "Madrid"

    async def test_get_establishments_projection(self):
        service, dao = _make_service()
        rows = [
            EstablishmentProjection(name="Establecimiento 1", tax_id="123456789"),
            EstablishmentProjection(name="Establecimiento 2", tax_id="987654321"),
        ]
        dao.list_projection = AsyncMock(return_value=rows)

        result = await service.get_establishments_projection(AsyncMock())

        assert result == rows
