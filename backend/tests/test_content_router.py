"""
Integration tests for the in-app content API endpoints.

The parser runs for real; nothing is mocked except where a test checks
logging.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from app.main import app, get_cors_origins


@pytest.fixture
def client():
    return TestClient(app)


class TestParseEndpoint:
    """Tests for POST /api/content/parse."""

    def test_plain_html_payload(self, client):
        response = client.post(
            "/api/content/parse",
            json={
                "html": '<a href="itbl://close">x</a>',
                "inAppDisplaySettings": {
                    "top": {"displayOption": "AutoExpand"},
                    "left": {"percentage": 37.9},
                    "backGroundAlpha": 0.5,
                },
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "html"
        assert data["padding"] == {"top": -1, "left": 37, "bottom": 0, "right": 0}
        assert data["background_alpha"] == 0.5
        assert "title" not in data

    def test_inbox_payload(self, client):
        response = client.post(
            "/api/content/parse",
            json={"contentType": "inboxHtml", "html": "<a href>", "inboxTitle": "T"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "inboxHtml"
        assert data["title"] == "T"
        assert data["subtitle"] is None
        assert data["icon"] is None

    def test_missing_html_is_422(self, client):
        response = client.post("/api/content/parse", json={})

        assert response.status_code == 422
        assert response.json()["detail"] == "no html"

    def test_missing_href_is_422(self, client):
        response = client.post("/api/content/parse", json={"html": "<div>no link</div>"})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert "href" in detail
        assert "<div>no link</div>" in detail

    def test_rejection_is_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="app.routers.content"):
            client.post("/api/content/parse", json={"html": "plain text"})

        assert "Rejected in-app payload" in caplog.text

    def test_non_object_body_is_422(self, client):
        response = client.post("/api/content/parse", json=["html"])

        assert response.status_code == 422


class TestTypesEndpoint:
    """Tests for GET /api/content/types."""

    def test_lists_all_types(self, client):
        response = client.get("/api/content/types")

        assert response.status_code == 200
        data = response.json()
        assert data["default"] == "html"
        decoders = {t["content_type"]: t["decoder"] for t in data["types"]}
        assert decoders == {
            "html": "create_inapp_html_content",
            "alert": "create_inapp_html_content",
            "banner": "create_inapp_html_content",
            "inboxHtml": "create_inbox_html_content",
        }


class TestAppEndpoints:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_root(self, client):
        assert client.get("/").json()["message"] == "In-App Content API"


class TestCorsOrigins:
    """Tests for CORS origin resolution."""

    def test_default_origin_only(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert get_cors_origins() == ["http://localhost:3000"]

    def test_extra_origins_are_deduplicated(self, monkeypatch):
        monkeypatch.setenv(
            "CORS_ORIGINS",
            "https://a.example.com, http://localhost:3000,,https://a.example.com",
        )
        assert get_cors_origins() == ["http://localhost:3000", "https://a.example.com"]
