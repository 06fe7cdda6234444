from __future__ import annotations

from unittest.mock import AsyncMock, patch

from app.services.employee_service import employee_service


def test_health_reports_upstream_ok(client):
    with patch.object(employee_service, "check_connection", AsyncMock(return_value=True)):
        response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["services"]["random_user_api"] == "ok"


def test_health_degraded_when_upstream_unreachable(client):
    with patch.object(employee_service, "check_connection", AsyncMock(return_value=False)):
        response = client.get("/api/health")

    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["random_user_api"] == "error"


def test_health_degraded_when_check_raises(client):
    with patch.object(employee_service, "check_connection", AsyncMock(side_effect=RuntimeError("boom"))):
        response = client.get("/api/health")

    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"] == {"random_user_api": "error"}


def test_health_not_configured_is_healthy(client):
    with patch.object(employee_service, "initialized", False):
        response = client.get("/api/health")

    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["random_user_api"] == "not_configured"


def test_readiness_probe(client):
    response = client.get("/api/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
