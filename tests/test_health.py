import logging

from fastapi.testclient import TestClient

from app.main import create_application


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "Coach API", "environment": "test"}


def test_readiness_reports_database_backend(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected", "backend": "sqlite"}


def test_readiness_fails_when_database_is_unreachable(client, monkeypatch):
    async def unreachable():
        raise ConnectionError("database is down")

    monkeypatch.setattr(client.app.state.db, "ping", unreachable)
    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "error", "database": "unavailable", "backend": "sqlite"}


def test_logging_is_configured_at_startup_not_on_build(settings, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    app = create_application(settings)
    assert calls == []

    with TestClient(app):
        pass
    assert [c["level"] for c in calls] == [settings.log_level.upper()]


def test_unknown_route_uses_error_body(client):
    response = client.get("/nope")
    assert response.status_code == 404
    assert "error" in response.json()
