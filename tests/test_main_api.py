"""
Tests for main API endpoints and middleware.
"""

import pytest
from fastapi.testclient import TestClient

from kmlview.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)


class TestMainEndpoints:
    """Tests for main API endpoints."""

    def test_root_endpoint(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "KML Viewer API"
        assert data["version"] == "0.1.0"

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_request_id_generated(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.headers.get("X-Request-ID")

    def test_request_id_propagated(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    def test_lifespan_startup(self) -> None:
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
