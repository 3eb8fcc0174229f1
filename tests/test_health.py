def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_health_endpoint(client, monkeypatch):
    monkeypatch.delenv("BACKEND_BUILT_AT", raising=False)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_health_includes_build_time(client, monkeypatch):
    monkeypatch.setenv("BACKEND_BUILT_AT", "2026-10-18T00:00:00Z")
    assert client.get("/health").json()["built_at"] == "2026-10-18T00:00:00Z"


def test_readiness_reports_database(client):
    resp = client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "connected"}
