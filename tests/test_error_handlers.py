"""
Tests for FastAPI error handlers.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from kmlview.api.error_handlers import register_error_handlers
from kmlview.core.errors import NotFoundError, ParseError, ValidationError


class ItemModel(BaseModel):
    name: str = Field(..., min_length=3)


@pytest.fixture
def client() -> TestClient:
    """Create test FastAPI app with error handlers."""
    test_app = FastAPI()

    @test_app.get("/test/validation-error")
    def raise_validation_error():
        raise ValidationError("Invalid input", field="test_field")

    @test_app.get("/test/parse-error")
    def raise_parse_error():
        raise ParseError("Parse failed", line_number=42)

    @test_app.get("/test/not-found")
    def raise_not_found():
        raise NotFoundError("Nothing here", error_code="NO_DOCUMENT")

    @test_app.get("/test/generic-error")
    def raise_generic_error():
        raise RuntimeError("Unexpected error")

    @test_app.post("/test/pydantic-validation")
    def pydantic_validation(data: ItemModel):
        return {"status": "ok"}

    register_error_handlers(test_app)
    return TestClient(test_app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Tests for the registered handlers."""

    def test_validation_error(self, client: TestClient) -> None:
        response = client.get("/test/validation-error")

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"]["field"] == "test_field"
        assert "timestamp" in data

    def test_parse_error(self, client: TestClient) -> None:
        response = client.get("/test/parse-error")

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "PARSE_ERROR"
        assert data["details"]["line_number"] == 42
        assert data["suggestions"]

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/test/not-found")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NO_DOCUMENT"

    def test_generic_error(self, client: TestClient) -> None:
        response = client.get("/test/generic-error")

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["details"]["exception_type"] == "RuntimeError"

    def test_request_validation_error(self, client: TestClient) -> None:
        response = client.post("/test/pydantic-validation", json={"name": "ab"})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "body.name"
