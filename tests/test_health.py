"""
Test health endpoints
"""

import uuid

from httpx import AsyncClient

from crm_core.models import ENTITY_CLASSES


async def test_health_check(client: AsyncClient):
    """Test basic health check endpoint."""
    response = await client.get("/health/")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert "version" in data


async def test_readiness_check(client: AsyncClient):
    """Test readiness endpoint."""
    response = await client.get("/health/ready")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ready"
    assert data["services"] == {"database": "healthy", "catalog": "healthy"}
    assert data["entities"] == len(ENTITY_CLASSES)


async def test_liveness_check(client: AsyncClient):
    """Test liveness endpoint."""
    response = await client.get("/health/live")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "alive"


async def test_root(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["entities"] == 52


async def test_metrics_endpoint(client: AsyncClient):
    await client.get("/health/live")
    response = await client.get("/metrics")
    assert response.status_code == 200
    assert "http_requests_total" in response.text


async def test_metrics_use_route_templates(client: AsyncClient, tenant_headers):
    entity_id = uuid.uuid4()
    await client.get(f"/api/v1/company/{entity_id}", headers=tenant_headers)
    await client.get("/no-such-page")

    response = await client.get("/metrics")

    assert 'endpoint="/api/v1/{slug}/{entity_id}"' in response.text
    assert 'endpoint="unmatched"' in response.text
    assert str(entity_id) not in response.text
