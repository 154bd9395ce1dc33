"""Tests for the health and readiness probes."""


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"
    assert "timestamp" in r.json()


def test_ready_with_database(client):
    r = client.get("/ready")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"
    assert r.json()["database"] == "connected"


def test_ready_without_database(client, monkeypatch):
    monkeypatch.setattr(client.app.state.database, "check_connection", lambda: False)
    r = client.get("/ready")
    assert r.status_code == 503
    assert r.json()["status"] == "not_ready"
    assert r.json()["database"] == "disconnected"


def test_probes_need_no_token(client):
    assert client.get("/health").status_code == 200
    assert client.get("/ready").status_code == 200
