"""
Test generic entity API endpoints
"""

import uuid

import pytest
from httpx import AsyncClient

API = "/api/v1"


async def create_company(client: AsyncClient, headers, **data):
    payload = {"name": "Acme Corporation", **data}
    response = await client.post(f"{API}/company", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCatalogEndpoints:
    """Test catalog description endpoints"""

    async def test_list_entities(self, client: AsyncClient):
        response = await client.get(f"{API}/entities")
        assert response.status_code == 200

        data = response.json()
        assert data["count"] == 52
        names = [entity["name"] for entity in data["entities"]]
        assert names[0] == "Agent"
        assert "WorkingHour" in names

    async def test_describe_entity(self, client: AsyncClient):
        response = await client.get(f"{API}/entities/deal-stage")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "DealStage"
        assert data["table"] == "deal_stage"
        assert "deal_id" in data["columns"]

    async def test_describe_unknown_entity(self, client: AsyncClient):
        response = await client.get(f"{API}/entities/invoice")
        assert response.status_code == 404


class TestCrudEndpoints:
    """Test create, read, update and delete"""

    async def test_create_entity(self, client: AsyncClient, tenant_headers, organization_id, user_id, sample_company_data):
        response = await client.post(f"{API}/company", json=sample_company_data, headers=tenant_headers)
        assert response.status_code == 201

        data = response.json()
        assert data["name"] == "Acme Corporation"
        assert data["organization_id"] == str(organization_id)
        assert data["created_by_id"] == str(user_id)
        assert data["active"] is True
        assert data["deleted_at"] is None
        uuid.UUID(data["id"])

    async def test_create_requires_organization(self, client: AsyncClient):
        response = await client.post(f"{API}/company", json={"name": "Acme"})
        assert response.status_code == 400
        assert "organization" in response.json()["detail"]

    async def test_create_global_entity(self, client: AsyncClient):
        response = await client.post(f"{API}/country", json={"name": "Portugal", "iso_code": "PT"})
        assert response.status_code == 201
        assert response.json()["iso_code"] == "PT"

    async def test_create_with_unknown_field(self, client: AsyncClient, tenant_headers):
        response = await client.post(f"{API}/company", json={"name": "Acme", "colour": "red"}, headers=tenant_headers)
        assert response.status_code == 400

    async def test_create_unknown_entity(self, client: AsyncClient, tenant_headers):
        response = await client.post(f"{API}/invoice", json={"number": 1}, headers=tenant_headers)
        assert response.status_code == 404

    async def test_malformed_organization_header(self, client: AsyncClient):
        response = await client.post(
            f"{API}/company",
            json={"name": "Acme"},
            headers={"X-Organization-Id": "acme"},
        )
        assert response.status_code == 400

    async def test_get_entity(self, client: AsyncClient, tenant_headers):
        company = await create_company(client, tenant_headers)

        response = await client.get(f"{API}/company/{company['id']}", headers=tenant_headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Acme Corporation"

    async def test_get_entity_of_other_tenant(self, client: AsyncClient, tenant_headers):
        company = await create_company(client, tenant_headers)

        other_tenant = {"X-Organization-Id": str(uuid.uuid4())}
        response = await client.get(f"{API}/company/{company['id']}", headers=other_tenant)
        assert response.status_code == 404

    async def test_get_missing_entity(self, client: AsyncClient, tenant_headers):
        response = await client.get(f"{API}/company/{uuid.uuid4()}", headers=tenant_headers)
        assert response.status_code == 404

    async def test_update_entity(self, client: AsyncClient, tenant_headers):
        company = await create_company(client, tenant_headers)

        response = await client.patch(
            f"{API}/company/{company['id']}",
            json={"industry": "Retail", "employee_count": 42},
            headers=tenant_headers,
        )
        assert response.status_code == 200

        data = response.json()
        assert data["industry"] == "Retail"
        assert data["employee_count"] == 42
        assert data["name"] == "Acme Corporation"

    async def test_update_read_only_field(self, client: AsyncClient, tenant_headers):
        company = await create_company(client, tenant_headers)

        response = await client.patch(
            f"{API}/company/{company['id']}",
            json={"created_at": "2020-01-01T00:00:00"},
            headers=tenant_headers,
        )
        assert response.status_code == 400

    async def test_soft_delete_and_restore(self, client: AsyncClient, tenant_headers):
        company = await create_company(client, tenant_headers)
        url = f"{API}/company/{company['id']}"

        response = await client.delete(url, headers=tenant_headers)
        assert response.status_code == 204

        response = await client.get(url, headers=tenant_headers)
        assert response.status_code == 404

        response = await client.get(url, params={"include_deleted": "true"}, headers=tenant_headers)
        assert response.status_code == 200
        assert response.json()["deleted_at"] is not None

        response = await client.post(f"{url}/restore", headers=tenant_headers)
        assert response.status_code == 200
        assert response.json()["deleted_at"] is None

    async def test_hard_delete(self, client: AsyncClient, tenant_headers):
        company = await create_company(client, tenant_headers)
        url = f"{API}/company/{company['id']}"

        response = await client.delete(url, params={"hard": "true"}, headers=tenant_headers)
        assert response.status_code == 204

        response = await client.get(url, params={"include_deleted": "true"}, headers=tenant_headers)
        assert response.status_code == 404

    async def test_delete_missing_entity(self, client: AsyncClient, tenant_headers):
        response = await client.delete(f"{API}/company/{uuid.uuid4()}", headers=tenant_headers)
        assert response.status_code == 404

    async def test_restore_entity_without_soft_delete(self, client: AsyncClient, tenant_headers):
        response = await client.post(f"{API}/tag", json={"name": "vip"}, headers=tenant_headers)
        tag = response.json()

        response = await client.post(f"{API}/tag/{tag['id']}/restore", headers=tenant_headers)
        assert response.status_code == 400


class TestSearchEndpoint:
    """Test search, filters, sorting and paging over HTTP"""

    @pytest.fixture
    async def companies(self, client: AsyncClient, tenant_headers):
        await create_company(client, tenant_headers, name="Acme Corporation", industry="Manufacturing", employee_count=250)
        await create_company(client, tenant_headers, name="Globex", industry="Energy", employee_count=4000, active=False)
        await create_company(client, tenant_headers, name="Initech", industry="Software", employee_count=80)

    async def test_search(self, client: AsyncClient, tenant_headers, companies):
        response = await client.get(f"{API}/company", params={"q": "glob"}, headers=tenant_headers)
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["name"] == "Globex"

    async def test_extra_params_are_filters(self, client: AsyncClient, tenant_headers, companies):
        response = await client.get(f"{API}/company", params={"active": "true"}, headers=tenant_headers)

        names = [item["name"] for item in response.json()["items"]]
        assert names == ["Acme Corporation", "Initech"]

    async def test_sort_and_paginate(self, client: AsyncClient, tenant_headers, companies):
        response = await client.get(
            f"{API}/company",
            params={"sort_by": "employee_count", "sort_dir": "desc", "limit": 2, "page": 1},
            headers=tenant_headers,
        )

        data = response.json()
        assert [item["employee_count"] for item in data["items"]] == [4000, 250]
        assert data["total"] == 3
        assert data["pages"] == 2
        assert data["has_next"] is True
        assert data["has_previous"] is False
        assert data["sort_by"] == "employee_count"
        assert data["sort_dir"] == "desc"

    async def test_search_is_tenant_scoped(self, client: AsyncClient, companies):
        response = await client.get(f"{API}/company", headers={"X-Organization-Id": str(uuid.uuid4())})

        assert response.status_code == 200
        assert response.json()["total"] == 0

    async def test_search_unknown_entity(self, client: AsyncClient, tenant_headers):
        response = await client.get(f"{API}/invoice", headers=tenant_headers)
        assert response.status_code == 404

    async def test_invalid_page(self, client: AsyncClient, tenant_headers):
        response = await client.get(f"{API}/company", params={"page": 0}, headers=tenant_headers)
        assert response.status_code == 422
