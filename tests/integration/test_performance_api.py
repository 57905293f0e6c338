"""
Integration tests for the performance and health endpoints.
"""

import pytest
from httpx import AsyncClient

from src import __version__


class TestPerformanceReport:
    """Tests for GET /performance."""

    @pytest.mark.asyncio
    async def test_report_format(
        self,
        client: AsyncClient,
        api_prefix: str,
        performance_probe,
    ):
        response = await client.get(f"{api_prefix}/performance")

        assert response.status_code == 200
        assert response.json() == {
            "time": "1970-01-01 00:11:54.135",
            "memory": "25.11",
            "threads": 16,
        }
        assert performance_probe.call_count == 1

    @pytest.mark.asyncio
    async def test_report_with_real_probe(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        from src.core.dependencies import get_performance_probe
        from src.main import app

        app.dependency_overrides.pop(get_performance_probe, None)

        response = await client.get(f"{api_prefix}/performance")

        assert response.status_code == 200
        data = response.json()
        assert data["time"].startswith("1970-01-")
        assert float(data["memory"]) >= 0
        assert data["threads"] >= 1


class TestHealth:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.get(f"{api_prefix}/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__

    @pytest.mark.asyncio
    async def test_root_redirects_to_docs(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/")

        assert response.status_code in (302, 307)
        assert response.headers["location"] == "/docs"


class TestUnexpectedErrors:
    """Tests for the catch-all 500 handler."""

    @pytest.mark.asyncio
    async def test_internal_error_carries_request_id(
        self,
        api_prefix: str,
    ):
        from httpx import ASGITransport

        from src.core.dependencies import get_performance_probe
        from src.domain.interfaces import PerformanceProbe
        from src.main import app

        class BrokenProbe(PerformanceProbe):
            def snapshot(self):
                raise RuntimeError("process table unavailable")

        app.dependency_overrides[get_performance_probe] = BrokenProbe
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                response = await ac.get(
                    f"{api_prefix}/performance",
                    headers={"X-Request-ID": "req-500"},
                )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
            "request_id": "req-500",
        }
