"""
HTTP tests for the health endpoints.
"""

from fastapi.testclient import TestClient

from coaster_api.core.coasters.errors import StorageError
from coaster_api.main import create_app

from conftest import make_settings


class DownStore:
    def list(self):
        raise StorageError("database is down")


class TestHealth:
    """Liveness and readiness."""

    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["details"] == {"store": "memory"}

    def test_ready_when_configured(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
        assert {c["name"] for c in response.json()["checks"]} == {"configuration", "store"}

    def test_not_ready_without_admin_password(self):
        app = create_app(settings=make_settings(admin_password=""))
        with TestClient(app) as client:
            response = client.get("/health/ready")

        assert response.status_code == 503
        checks = {c["name"]: c for c in response.json()["checks"]}
        assert "ADMIN_PASSWORD" in checks["configuration"]["error"]
        assert checks["store"]["status"] == "ok"

    def test_not_ready_when_store_fails(self):
        app = create_app(settings=make_settings(), store=DownStore())
        with TestClient(app) as client:
            response = client.get("/health/ready")

        assert response.status_code == 503
        checks = {c["name"]: c for c in response.json()["checks"]}
        assert checks["store"]["error"] == "database is down"
