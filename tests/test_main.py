"""End-to-end checks against the demo service."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch):
    for name in ("CACHE_CONTROL_OVERRIDE", "CACHE_CONTROL_MAX_AGE", "CACHE_CONTROL_MIRROR_REQUEST"):
        monkeypatch.delenv(name, raising=False)

    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


def test_health_is_cacheable(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "cache-control"}
    assert response.headers["Cache-Control"] == "public, max-age=3600"


def test_known_item_is_cacheable(client) -> None:
    response = client.get("/items/1")

    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "public, max-age=3600"


def test_missing_item_is_no_store(client) -> None:
    response = client.get("/items/404")

    assert response.status_code == 404
    assert response.headers["Cache-Control"] == "no-store"


def test_validation_error_is_no_store(client) -> None:
    response = client.get("/items/not-a-number")

    assert response.status_code == 422
    assert response.headers["Cache-Control"] == "no-store"


def test_redirect_is_no_cache(client) -> None:
    response = client.get("/redirect", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["Cache-Control"] == "no-cache"


def test_handler_header_is_kept(client) -> None:
    response = client.get("/pinned")

    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "max-age=10"
