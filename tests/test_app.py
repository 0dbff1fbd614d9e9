import pytest
from fastapi.testclient import TestClient

import core.config as config
from main import create_app


@pytest.fixture
def build_client(monkeypatch):
    def _build(**flags):
        for name, value in flags.items():
            monkeypatch.setattr(config, name, value)
        return TestClient(create_app())
    return _build


def test_docs_are_served_when_enabled(build_client):
    c = build_client(ENABLE_DOCS=True, FORCE_HTTPS=False)
    assert c.get("/docs").status_code == 200
    assert "/api/customers/page" in c.get("/openapi.json").json()["paths"]


def test_docs_are_hidden_when_disabled(build_client):
    c = build_client(ENABLE_DOCS=False, FORCE_HTTPS=False)
    assert c.get("/docs").status_code == 404
    assert c.get("/openapi.json").status_code == 404


def test_https_redirect_when_forced(build_client):
    c = build_client(ENABLE_DOCS=False, FORCE_HTTPS=True)
    response = c.get("/api/customers", params={"search": "x"}, follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "https://testserver/api/customers?search=x"


def test_cors_allows_configured_origins(build_client):
    c = build_client(ENABLE_DOCS=False, FORCE_HTTPS=False, CORS_ORIGINS=["*"])
    response = c.options(
        "/api/customers",
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
