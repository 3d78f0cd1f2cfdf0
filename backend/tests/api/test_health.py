"""Health Checks - liveness always up, readiness follows the database check.

Invariants:
    - GET /health/ answers 200 without touching the database
    - GET /health/ready answers 503 when no manager exists or its check fails
"""

import fieldhub.infrastructure.database as db_module

BASE = "/api/v1/health"


class _StubManager:
    def __init__(self, healthy: bool):
        self.healthy = healthy

    async def health_check(self) -> bool:
        return self.healthy


async def test_liveness_returns_200(client):
    res = await client.get(f"{BASE}/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get(f"{BASE}/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}


async def test_readiness_with_failing_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", _StubManager(healthy=False))
    res = await client.get(f"{BASE}/ready")
    assert res.status_code == 503


async def test_readiness_with_healthy_database_returns_200(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", _StubManager(healthy=True))
    res = await client.get(f"{BASE}/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}
