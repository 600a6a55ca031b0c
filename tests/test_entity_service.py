"""
Test the entity service
"""

import uuid

import pytest

from crm_core.core.exceptions import EntityNotFoundError, ValidationError
from crm_core.services import entity_service
from crm_core.services.entity_service import EntityService


class RecordingLogger:
    def __init__(self):
        self.events = []

    def _record(self, level):
        def log(event, **kw):
            self.events.append((level, event))
        return log

    def __getattr__(self, level):
        return self._record(level)


@pytest.fixture
def recorded(monkeypatch):
    logger = RecordingLogger()
    monkeypatch.setattr(entity_service, "logger", logger)
    return logger.events


@pytest.fixture
def companies(test_db, organization_id, user_id, hook_registry):
    return EntityService(test_db, "Company", organization_id=organization_id, user_id=user_id, hooks=hook_registry)


class TestEntityService:
    """Test service results and error logging"""

    async def test_get(self, companies):
        created = await companies.create({"name": "Acme"})

        fetched = await companies.get(created["id"])

        assert fetched["name"] == "Acme"

    async def test_get_missing_entity(self, companies, recorded):
        with pytest.raises(EntityNotFoundError):
            await companies.get(uuid.uuid4())

        assert recorded == []

    async def test_get_logs_unexpected_errors(self, companies, recorded, monkeypatch):
        async def broken(*args, **kwargs):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(companies.repository, "get_or_raise", broken)

        with pytest.raises(RuntimeError):
            await companies.get(uuid.uuid4())

        assert recorded == [("error", "Failed to get entity")]

    async def test_restore(self, companies, recorded):
        created = await companies.create({"name": "Acme"})
        await companies.delete(created["id"])

        restored = await companies.restore(created["id"])

        assert restored["deleted_at"] is None
        assert ("info", "Entity restored") in recorded

    async def test_restore_rejected(self, test_db, organization_id, hook_registry, recorded):
        tags = EntityService(test_db, "Tag", organization_id=organization_id, hooks=hook_registry)
        tag = await tags.create({"name": "vip"})

        with pytest.raises(ValidationError):
            await tags.restore(tag["id"])

        assert ("warning", "Entity restore rejected") in recorded

    async def test_restore_logs_unexpected_errors(self, companies, recorded, monkeypatch):
        async def broken(*args, **kwargs):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(companies.repository, "restore", broken)

        with pytest.raises(RuntimeError):
            await companies.restore(uuid.uuid4())

        assert recorded == [("error", "Failed to restore entity")]
