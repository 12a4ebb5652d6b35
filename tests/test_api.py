"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from svg_inspector import __version__
from svg_inspector.api import validate as validate_api
from svg_inspector.config import Settings
from svg_inspector.main import app

VALID_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">'
    '<rect x="10" y="10" width="80" height="80" fill="#FF0000"/></svg>'
)


@pytest.fixture
def client():
    return TestClient(app)


class TestInfoEndpoints:
    """Root and health."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "SVG Inspector"
        assert data["health"] == "/api/v1/health"

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["known_elements"] > 50
        assert data["schema_problems"] == []

    def test_lifespan_runs(self):
        with TestClient(app) as client:
            assert client.get("/api/v1/health").status_code == 200


class TestValidateEndpoint:
    """POST /api/v1/validate."""

    def test_valid_document(self, client):
        response = client.post("/api/v1/validate", json={"svg": VALID_SVG})
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["errors"] == []
        assert data["duration_ms"] >= 0

    def test_invalid_document(self, client):
        svg = '<svg width="100"><rect bogus="1"/></svg>'
        response = client.post("/api/v1/validate", json={"svg": svg})
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert [issue["code"] for issue in data["issues"]] == [
            "MISSING_REQUIRED_ATTRIBUTE",
            "DISALLOWED_ATTRIBUTE",
        ]
        assert data["issues"][1]["attribute"] == "bogus"
        assert data["summary"] == {"MISSING_REQUIRED_ATTRIBUTE": 1, "DISALLOWED_ATTRIBUTE": 1}

    def test_malformed_document_is_a_result(self, client):
        response = client.post("/api/v1/validate", json={"svg": "<svg><rect></svg>"})
        assert response.status_code == 200
        assert response.json()["summary"] == {"MALFORMED_DOCUMENT": 1}

    def test_missing_field(self, client):
        response = client.post("/api/v1/validate", json={})
        assert response.status_code == 422

    def test_non_string_field(self, client):
        response = client.post("/api/v1/validate", json={"svg": 123})
        assert response.status_code == 422

    def test_oversized_document(self, client, monkeypatch):
        monkeypatch.setattr(validate_api, "get_settings", lambda: Settings(MAX_DOCUMENT_BYTES=16))
        response = client.post("/api/v1/validate", json={"svg": VALID_SVG})
        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "validation_error"
        assert "limit is 16 bytes" in data["message"]
