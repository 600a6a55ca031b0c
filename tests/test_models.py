"""
Test entity mixins and the entity registry
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from crm_core.core.exceptions import UnknownEntityError
from crm_core.models import Company, Country, Deal, DealStage, Tag
from crm_core.models.registry import (
    column_names,
    describe,
    entity_for_slug,
    get_entity_class,
    is_soft_deletable,
    is_tenant_scoped,
    iter_entities,
    slug_for,
    to_dict,
)


class TestMixins:
    """Test audit and soft-delete behaviour"""

    def test_soft_delete_and_restore(self):
        user_id = uuid.uuid4()
        company = Company(name="Acme")

        assert company.is_active
        assert not company.is_deleted

        company.soft_delete(user_id)
        assert company.is_deleted
        assert company.deleted_by_id == user_id
        assert company.deleted_at.tzinfo is not None

        company.restore()
        assert company.is_active
        assert company.deleted_at is None
        assert company.deleted_by_id is None

    def test_touch(self):
        user_id = uuid.uuid4()
        tag = Tag(name="vip")

        tag.touch(user_id)
        assert tag.updated_by_id == user_id
        assert tag.updated_at is not None

        tag.touch()
        assert tag.updated_by_id == user_id

    def test_common_columns(self):
        columns = set(column_names(Deal))
        assert {
            "id",
            "organization_id",
            "created_at",
            "updated_at",
            "created_by_id",
            "updated_by_id",
            "deleted_at",
            "deleted_by_id",
        } <= columns

        assert "organization_id" not in column_names(Country)
        assert "deleted_at" not in column_names(Tag)


class TestRegistry:
    """Test entity lookup helpers"""

    def test_get_entity_class(self):
        assert get_entity_class("Deal") is Deal

    def test_get_unknown_entity(self):
        with pytest.raises(UnknownEntityError):
            get_entity_class("deal")

    def test_slugs(self):
        assert slug_for(DealStage) == "deal-stage"
        assert entity_for_slug("deal-stage") is DealStage

        with pytest.raises(UnknownEntityError):
            entity_for_slug("deal_stage")

    def test_slugs_are_unique(self):
        slugs = [slug_for(model) for model in iter_entities()]
        assert len(slugs) == len(set(slugs)) == 52

    def test_flags(self):
        assert is_tenant_scoped(Deal)
        assert is_soft_deletable(Deal)
        assert not is_tenant_scoped(Country)
        assert not is_soft_deletable(Tag)

    def test_describe(self):
        info = describe(Country)

        assert info["name"] == "Country"
        assert info["plural_label"] == "Countries"
        assert info["table"] == "country"
        assert info["slug"] == "country"
        assert info["tenant_scoped"] is False
        assert "iso_code" in info["searchable_fields"]
        assert "languages" not in info["filterable_fields"]
        assert info["sortable_fields"][-2:] == ["created_at", "updated_at"]

    def test_to_dict(self):
        entity_id = uuid.uuid4()
        deal = Deal(
            id=entity_id,
            name="Renewal",
            amount=Decimal("1500.00"),
            expected_close_date=date(2026, 3, 31),
            closed_at=datetime(2026, 3, 30, 12, 0, tzinfo=timezone.utc),
        )

        data = to_dict(deal)

        assert data["id"] == str(entity_id)
        assert data["amount"] == "1500.00"
        assert data["expected_close_date"] == "2026-03-31"
        assert data["closed_at"] == "2026-03-30T12:00:00+00:00"
        assert data["deleted_at"] is None
        assert "deal_type" not in data
        assert data["deal_type_id"] is None
