"""
HTTP tests for the health check and the app-level error handlers.
"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

pytestmark = [pytest.mark.integration, pytest.mark.controllers]


def test_health_reports_healthy(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy", "database": "ok"}


def test_health_reports_unreachable_store(client):
    with patch(
        "healthcare.controllers.health_controller.test_database_connection",
        return_value=False,
    ):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json()["status"] == "unhealthy"


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nurses")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_store_failure_returns_500(client):
    with patch(
        "healthcare.repositories.base_repo.SQLAlchemyRepository.get_all",
        side_effect=OperationalError("SELECT", {}, Exception("disk I/O error")),
    ):
        response = client.get("/api/doctors")

    assert response.status_code == 500
    assert response.get_json()["message"] == "Internal server error"


def test_responses_carry_request_id(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"
