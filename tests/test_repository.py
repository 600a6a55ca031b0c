"""
Test the generic entity repository
"""

import uuid

import pytest

from crm_core.core.exceptions import EntityNotFoundError, TenantRequiredError, ValidationError
from crm_core.models import Company, Contact, Country, Pipeline, PipelineStage, Tag
from crm_core.repositories.base import (
    EntityRepository,
    SearchCriteria,
    normalize_search_term,
    parse_boolean,
)


@pytest.fixture
def companies(test_db, organization_id, hook_registry):
    return EntityRepository(test_db, Company, organization_id=organization_id, hooks=hook_registry)


@pytest.fixture
def contacts(test_db, organization_id, hook_registry):
    return EntityRepository(test_db, Contact, organization_id=organization_id, hooks=hook_registry)


@pytest.fixture
async def seeded_companies(companies, user_id):
    """Three companies for search tests."""
    await companies.create({"name": "Acme Corporation", "industry": "Manufacturing", "employee_count": 250}, user_id)
    await companies.create({"name": "Crème Brûlée Bakery", "industry": "Food", "employee_count": 12}, user_id)
    await companies.create({"name": "Globex", "industry": "Energy", "employee_count": 4000, "active": False}, user_id)


class TestHelpers:
    """Test search helper functions"""

    def test_normalize_search_term(self):
        assert normalize_search_term("  Crème BRÛLÉE ") == "creme brulee"

    @pytest.mark.parametrize("value", ["true", "1", "YES", "y", "Active", True])
    def test_parse_boolean_true(self, value):
        assert parse_boolean(value) is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "N", "inactive", False])
    def test_parse_boolean_false(self, value):
        assert parse_boolean(value) is False

    def test_parse_boolean_unknown(self):
        assert parse_boolean("maybe") is None


class TestCreate:
    """Test entity creation"""

    async def test_create_sets_tenant_and_audit(self, companies, organization_id, user_id, sample_company_data):
        company = await companies.create(sample_company_data, user_id)

        assert isinstance(company.id, uuid.UUID)
        assert company.organization_id == organization_id
        assert company.created_by_id == user_id
        assert company.updated_by_id == user_id
        assert company.created_at is not None
        assert company.active is True
        assert company.is_active
        assert company.employee_count == 250

    async def test_create_requires_organization(self, test_db, hook_registry):
        repository = EntityRepository(test_db, Company, hooks=hook_registry)

        with pytest.raises(TenantRequiredError):
            await repository.create({"name": "Acme"})

    async def test_create_global_entity_without_organization(self, test_db, hook_registry):
        repository = EntityRepository(test_db, Country, hooks=hook_registry)

        country = await repository.create({"name": "Portugal", "iso_code": "PT"})

        assert country.eu_member is False
        assert not hasattr(country, "organization_id")

    async def test_create_rejects_unknown_field(self, companies):
        with pytest.raises(ValidationError) as exc_info:
            await companies.create({"name": "Acme", "favourite_colour": "blue"})
        assert exc_info.value.field == "favourite_colour"

    async def test_create_rejects_read_only_field(self, companies):
        with pytest.raises(ValidationError) as exc_info:
            await companies.create({"name": "Acme", "id": str(uuid.uuid4())})
        assert exc_info.value.field == "id"

    async def test_create_requires_mandatory_fields(self, companies):
        with pytest.raises(ValidationError) as exc_info:
            await companies.create({"industry": "Retail"})
        assert exc_info.value.field == "name"

    async def test_create_rejects_invalid_value(self, companies):
        with pytest.raises(ValidationError) as exc_info:
            await companies.create({"name": "Acme", "employee_count": "many"})
        assert exc_info.value.field == "employee_count"

    async def test_create_coerces_json_values(self, contacts):
        contact = await contacts.create({"first_name": "Ana", "birthday": "1990-05-17", "email_opt_out": "yes"})

        assert contact.birthday.isoformat() == "1990-05-17"
        assert contact.email_opt_out is True

    async def test_unique_constraint_is_a_validation_error(self, test_db, hook_registry):
        repository = EntityRepository(test_db, Country, hooks=hook_registry)
        await repository.create({"name": "Portugal", "iso_code": "PT"})

        with pytest.raises(ValidationError):
            await repository.create({"name": "Portugal again", "iso_code": "PT"})

        assert len(await repository.list()) == 1


class TestRead:
    """Test entity retrieval"""

    async def test_get_by_id(self, companies, user_id):
        company = await companies.create({"name": "Acme"}, user_id)

        found = await companies.get_by_id(company.id)
        assert found is not None
        assert found.name == "Acme"

        assert await companies.get_by_id(str(company.id)) is not None

    async def test_other_tenant_cannot_see_entity(self, test_db, companies, hook_registry):
        company = await companies.create({"name": "Acme"})
        other = EntityRepository(test_db, Company, organization_id=uuid.uuid4(), hooks=hook_registry)

        assert await other.get_by_id(company.id) is None
        assert await other.list() == []

    async def test_get_or_raise_missing(self, companies):
        with pytest.raises(EntityNotFoundError):
            await companies.get_or_raise(uuid.uuid4())

    async def test_get_by_malformed_id(self, companies):
        with pytest.raises(ValidationError):
            await companies.get_by_id("not-a-uuid")

    async def test_list_with_filters(self, companies, seeded_companies):
        assert len(await companies.list()) == 3

        energy = await companies.list(filters={"industry": "Energy"})
        assert [company.name for company in energy] == ["Globex"]

        assert len(await companies.list(limit=2)) == 2
        assert len(await companies.list(limit=2, offset=2)) == 1


class TestUpdate:
    """Test entity updates"""

    async def test_update_fields(self, companies, user_id):
        company = await companies.create({"name": "Acme"})

        updated = await companies.update(company.id, {"name": "Acme Corp", "employee_count": 10}, user_id)

        assert updated.name == "Acme Corp"
        assert updated.employee_count == 10
        assert updated.updated_by_id == user_id

    async def test_update_rejects_read_only_fields(self, companies):
        company = await companies.create({"name": "Acme"})

        with pytest.raises(ValidationError):
            await companies.update(company.id, {"organization_id": str(uuid.uuid4())})

    async def test_update_rejects_null_for_required_field(self, companies):
        company = await companies.create({"name": "Acme"})

        with pytest.raises(ValidationError):
            await companies.update(company.id, {"name": None})

    async def test_update_missing_entity(self, companies):
        with pytest.raises(EntityNotFoundError):
            await companies.update(uuid.uuid4(), {"name": "Nobody"})


class TestDelete:
    """Test soft and hard deletion"""

    async def test_soft_delete_and_restore(self, companies, user_id):
        company = await companies.create({"name": "Acme"})

        assert await companies.delete(company.id, user_id) is True
        assert await companies.get_by_id(company.id) is None

        deleted = await companies.get_by_id(company.id, include_deleted=True)
        assert deleted.is_deleted
        assert deleted.deleted_by_id == user_id

        restored = await companies.restore(company.id, user_id)
        assert restored.is_active
        assert restored.deleted_by_id is None
        assert await companies.get_by_id(company.id) is not None

    async def test_hard_delete_soft_deletable_entity(self, companies):
        company = await companies.create({"name": "Acme"})

        assert await companies.delete(company.id, hard=True) is True
        assert await companies.get_by_id(company.id, include_deleted=True) is None

    async def test_hard_delete_after_soft_delete(self, companies):
        company = await companies.create({"name": "Acme"})
        await companies.delete(company.id)

        assert await companies.delete(company.id, hard=True) is True
        assert await companies.get_by_id(company.id, include_deleted=True) is None

    async def test_delete_without_soft_delete_support(self, test_db, organization_id, hook_registry):
        tags = EntityRepository(test_db, Tag, organization_id=organization_id, hooks=hook_registry)
        tag = await tags.create({"name": "vip"})

        assert await tags.delete(tag.id) is True
        assert await tags.get_by_id(tag.id) is None

        with pytest.raises(ValidationError):
            await tags.restore(tag.id)

    async def test_delete_missing_entity(self, companies):
        assert await companies.delete(uuid.uuid4()) is False

    async def test_restore_missing_entity(self, companies):
        with pytest.raises(EntityNotFoundError):
            await companies.restore(uuid.uuid4())


class TestSearch:
    """Test search, filtering, sorting and pagination"""

    async def test_search_all(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria())

        assert result.total == 3
        assert [company.name for company in result.items] == ["Acme Corporation", "Crème Brûlée Bakery", "Globex"]
        assert result.sort_by == "name"
        assert result.sort_dir == "asc"

    async def test_search_is_case_insensitive(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(query="ACME"))

        assert [company.name for company in result.items] == ["Acme Corporation"]

    async def test_search_term_accents_are_ignored(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(query="Crème"))

        assert result.total == 1
        assert result.items[0].name == "Crème Brûlée Bakery"

    async def test_plain_term_matches_accented_value(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(query="creme brulee"))

        assert [company.name for company in result.items] == ["Crème Brûlée Bakery"]

    async def test_exact_accented_spelling(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(query="Brûlée"))
        assert result.total == 1

    async def test_text_filter_ignores_accents(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(filters={"name": "BRÛLÉE"}))
        assert [company.name for company in result.items] == ["Crème Brûlée Bakery"]

        plain = await companies.api_search(SearchCriteria(filters={"name": "creme"}))
        assert plain.total == 1

    async def test_blank_query_returns_everything(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(query="   "))
        assert result.total == 3

    async def test_boolean_filter(self, companies, seeded_companies):
        inactive = await companies.api_search(SearchCriteria(filters={"active": "inactive"}))
        assert [company.name for company in inactive.items] == ["Globex"]

        active = await companies.api_search(SearchCriteria(filters={"active": "yes"}))
        assert active.total == 2

        unparsed = await companies.api_search(SearchCriteria(filters={"active": "perhaps"}))
        assert unparsed.total == 3

    async def test_exact_filter(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(filters={"employee_count": "250"}))
        assert [company.name for company in result.items] == ["Acme Corporation"]

        invalid = await companies.api_search(SearchCriteria(filters={"employee_count": "lots"}))
        assert invalid.total == 3

    async def test_text_filter_matches_substring(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(filters={"industry": "MANU"}))
        assert [company.name for company in result.items] == ["Acme Corporation"]

    async def test_unknown_filter_is_ignored(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(filters={"planet": "Mars"}))
        assert result.total == 3

    async def test_datetime_range_filter(self, companies, seeded_companies):
        everything = await companies.api_search(SearchCriteria(filters={"created_at": "2000-01-01:2999-12-31"}))
        assert everything.total == 3

        future = await companies.api_search(SearchCriteria(filters={"created_at": "2999-01-01:"}))
        assert future.total == 0

        invalid = await companies.api_search(SearchCriteria(filters={"created_at": "yesterday:tomorrow"}))
        assert invalid.total == 3

    async def test_date_range_filter(self, contacts):
        await contacts.create({"first_name": "Ana", "birthday": "1990-05-17"})
        await contacts.create({"first_name": "Rui", "birthday": "1985-01-02"})
        await contacts.create({"first_name": "Eva"})

        result = await contacts.api_search(SearchCriteria(filters={"birthday": "1990-01-01:1990-12-31"}))
        assert [contact.first_name for contact in result.items] == ["Ana"]

        up_to = await contacts.api_search(SearchCriteria(filters={"birthday": ":1990-05-17"}))
        assert up_to.total == 2

    async def test_sorting(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(sort_by="employee_count", sort_dir="DESC"))

        assert [company.employee_count for company in result.items] == [4000, 250, 12]
        assert result.sort_by == "employee_count"
        assert result.sort_dir == "desc"

    async def test_invalid_sort_falls_back(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(sort_by="description", sort_dir="sideways"))

        assert result.sort_by == "name"
        assert result.sort_dir == "asc"
        assert result.items[0].name == "Acme Corporation"

    async def test_pagination(self, companies, seeded_companies):
        result = await companies.api_search(SearchCriteria(page=2, limit=2))

        assert result.total == 3
        assert result.pages == 2
        assert [company.name for company in result.items] == ["Globex"]
        assert result.has_previous
        assert not result.has_next

    async def test_limit_is_clamped(self, test_db, organization_id, hook_registry, seeded_companies):
        repository = EntityRepository(
            test_db, Company, organization_id=organization_id, hooks=hook_registry, max_page_size=2
        )

        result = await repository.api_search(SearchCriteria(limit=50))

        assert result.limit == 2
        assert len(result.items) == 2
        assert result.has_next

    async def test_deleted_entities_are_excluded(self, companies, seeded_companies):
        globex = (await companies.api_search(SearchCriteria(query="globex"))).items[0]
        await companies.delete(globex.id)

        assert (await companies.api_search(SearchCriteria())).total == 2
        assert (await companies.api_search(SearchCriteria(include_deleted=True))).total == 3

    async def test_search_requires_organization(self, test_db, hook_registry):
        repository = EntityRepository(test_db, Company, hooks=hook_registry)

        with pytest.raises(TenantRequiredError):
            await repository.api_search(SearchCriteria())


class TestRelations:
    """Test eager loading of relations"""

    async def test_find_all_with_relations(self, companies, contacts):
        company = await companies.create({"name": "Acme"})
        await contacts.create({"first_name": "Ana", "company_id": str(company.id)})

        found = await contacts.find_all_with_relations(["company"])

        assert len(found) == 1
        assert found[0].company_id == company.id
        assert found[0].company.name == "Acme"

    async def test_unknown_relation(self, contacts):
        with pytest.raises(ValidationError):
            await contacts.find_all_with_relations(["employer"])


class TestForeignKeys:
    """Test that relation columns are enforced by the database"""

    @pytest.fixture
    def pipelines(self, test_db, organization_id, hook_registry):
        return EntityRepository(test_db, Pipeline, organization_id=organization_id, hooks=hook_registry)

    @pytest.fixture
    def stages(self, test_db, organization_id, hook_registry):
        return EntityRepository(test_db, PipelineStage, organization_id=organization_id, hooks=hook_registry)

    async def test_missing_parent_is_rejected(self, stages):
        with pytest.raises(ValidationError):
            await stages.create({"name": "Orphan", "pipeline_id": str(uuid.uuid4())})

        assert await stages.list() == []

    async def test_hard_delete_cascades_to_children(self, pipelines, stages):
        pipeline = await pipelines.create({"name": "Sales"})
        await stages.create({"name": "Qualified", "pipeline_id": str(pipeline.id)})
        await stages.create({"name": "Won", "pipeline_id": str(pipeline.id), "is_won": True})

        assert await pipelines.delete(pipeline.id, hard=True) is True

        assert await stages.list() == []

    async def test_soft_delete_keeps_children(self, pipelines, stages):
        pipeline = await pipelines.create({"name": "Sales"})
        await stages.create({"name": "Qualified", "pipeline_id": str(pipeline.id)})

        await pipelines.delete(pipeline.id)

        assert len(await stages.list()) == 1

    async def test_hard_delete_clears_optional_reference(self, test_db, companies, contacts):
        company = await companies.create({"name": "Acme"})
        contact = await contacts.create({"first_name": "Ana", "company_id": str(company.id)})

        await companies.delete(company.id, hard=True)
        await test_db.refresh(contact)

        assert contact.company_id is None
