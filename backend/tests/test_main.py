"""Tests for application assembly: health check, request ids, error envelopes."""

import pytest
from fastapi.testclient import TestClient

from boilerplate.api.dependencies import get_session
from boilerplate.config import Settings
from boilerplate.main import create_app


@pytest.fixture
def client(db_session):
    app = create_app(Settings(jwt_secret="main-test-secret"))

    def override_session():
        yield db_session

    app.dependency_overrides[get_session] = override_session
    with TestClient(app) as test_client:
        yield test_client


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_request_id_echoed(client):
    response = client.get("/healthz", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_generated(client):
    response = client.get("/healthz")
    assert len(response.headers["X-Request-ID"]) == 36


def test_malformed_query_param_is_400(client):
    response = client.get("/api/todos/v1", params={"limit": "ten"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "invalid request options"
    assert "data" not in body


def test_unknown_route_is_enveloped(client):
    response = client.get("/api/widgets/v1")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_routes_registered(client):
    paths = set(client.app.openapi()["paths"])
    for resource in ("todos", "organisations", "memberships", "records"):
        assert f"/api/{resource}/v1" in paths
        assert f"/api/{resource}/v1/{{{resource[:-1]}_id}}" in paths
