"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from docdedup.interfaces.api.resources.health import HealthResource


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Test client without a readiness check."""
    return _client(HealthResource())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_runs_check() -> None:
    calls: list[str] = []

    async def check() -> None:
        calls.append("checked")

    result = _client(HealthResource(ready_check=check)).simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert calls == ["checked"]


def test_health_not_ready_when_check_fails() -> None:
    """Readiness is 503 while the database is unreachable; liveness stays 200."""

    async def check() -> None:
        raise ConnectionError("database unreachable")

    client = _client(HealthResource(ready_check=check))
    assert client.simulate_get("/v1/health/ready").status_code == 503
    assert client.simulate_get("/v1/health/ready").json["status"] == "unavailable"
    assert client.simulate_get("/v1/health").status_code == 200
