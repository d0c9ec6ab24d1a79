"""Tests for FamilyService."""

from unittest.mock import AsyncMock

import pytest

from polloschicharron.dao.family_dao import FamilyDAO
from polloschicharron.domain import Family
from polloschicharron.models import FamilyRecord
from polloschicharron.services import InvalidStateError
from polloschicharron.services.family_service import FamilyService


def _make_service() -> tuple[FamilyService, FamilyDAO]:
    dao = FamilyDAO()
    dao.exists = AsyncMock(return_value=True)
    dao.save = AsyncMock(return_value=FamilyRecord(id=1, name="Pollos"))
    return FamilyService(dao), dao


class TestCreate:
    async def test_create_returns_assigned_id(self):
        service, dao = _make_service()
        family = Family(name="Pollos")

        family_id = await service.create(AsyncMock(), family)

        assert family_id == 1
        saved = dao.save.call_args[0][1]
        assert saved.id is None
        assert saved.name == "Pollos"

    async def test_create_does_not_mutate_input(self):
        service, _ = _make_service()
        family = Family(name="Pollos")

        await service.create(AsyncMock(), family)

        assert family.id is None

    async def test_create_with_id_rejected(self):
        service, dao = _make_service()

        with pytest.raises(InvalidStateError, match="id must be null to create a family"):
            await service.create(AsyncMock(), Family(id=1, name="Pollos"))

        dao.save.assert_not_awaited()


class TestRead:
    async def test_read_found(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=FamilyRecord(id=1, name="Pollos"))

        result = await service.read(AsyncMock(), 1)

        assert result == Family(id=1, name="Pollos")

    async def test_read_unknown_returns_none(self):
        service, dao = _make_service()
        dao.get_by_id = AsyncMock(return_value=None)

        assert await service.read(AsyncMock(), 999) is None


class TestUpdate:
    async def test_update_existing(self):
        service, dao = _make_service()

        await service.update(AsyncMock(), Family(id=1, name="Familia Actualizada"))

        dao.save.assert_awaited_once()
        saved = dao.save.call_args[0][1]
        assert saved.id == 1
        assert saved.name == "Familia Actualizada"

    async def test_update_unknown(self):
        service, dao = _make_service()
        dao.exists = AsyncMock(return_value=False)

        with pytest.raises(InvalidStateError, match=r"family with id \[1\] does not exist"):
            await service.update(AsyncMock(), Family(id=1, name="X"))

        dao.save.assert_not_awaited()

    async def test_update_without_id(self):
        service, dao = _make_service()

        with pytest.raises(InvalidStateError):
            await service.update(AsyncMock(), Family(name="X"))

        dao.exists.assert_not_awaited()
        dao.save.assert_not_awaited()


class TestGetAll:
    async def test_get_all(self):
        service, dao = _make_service()
        dao.list_all = AsyncMock(
            return_value=[FamilyRecord(id=1, name="Pollos"), FamilyRecord(id=2, name="Bebidas")]
        )

        result = await service.get_all(AsyncMock())

        assert len(result) == 2
        assert Family(id=1, name="Pollos") in result
        assert Family(id=2, name="Bebidas") in result
