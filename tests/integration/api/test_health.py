"""Integration tests for health endpoints and request middleware."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_and_live(client: AsyncClient):
    assert (await client.get("/health")).json()["status"] == "healthy"
    assert (await client.get("/live")).json()["status"] == "alive"


@pytest.mark.asyncio
@pytest.mark.parametrize("connected, code", [(True, 200), (False, 503)])
async def test_ready(client: AsyncClient, connected, code):
    manager = MagicMock()
    manager.check_connection = AsyncMock(return_value=connected)

    with patch("dynadocs.infrastructure.api.app.get_db_manager", return_value=manager):
        response = await client.get("/ready")

    assert response.status_code == code


@pytest.mark.asyncio
async def test_correlation_id_header(client: AsyncClient):
    response = await client.get("/health", headers={"X-Correlation-ID": "cid_test"})
    assert response.headers["X-Correlation-ID"] == "cid_test"

    response = await client.get("/health")
    assert response.headers["X-Correlation-ID"].startswith("cid_")


@pytest.mark.asyncio
async def test_store_unavailable_maps_to_503(client: AsyncClient):
    from dynadocs.domain.exceptions import StoreUnavailableError
    from dynadocs.domain.services import DocumentService

    with patch.object(
        DocumentService, "list_schemas", AsyncMock(side_effect=StoreUnavailableError("down"))
    ):
        response = await client.get("/api/dynamic/schemas")

    assert response.status_code == 503
    assert response.json()["error"] == "Service unavailable"
