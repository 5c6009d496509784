"""Health Probe — verifies GET /api/health."""

from datetime import datetime


async def test_health_returns_ok(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    body = res.json()
    assert body["status"] == "OK"
    assert body["message"] == "Service is healthy"
    assert "timestamp" in body
    assert "uptime" in body


async def test_health_timestamp_is_valid_date(client):
    res = await client.get("/api/health")
    assert isinstance(datetime.fromisoformat(res.json()["timestamp"]), datetime)


async def test_health_uptime_non_negative_and_non_decreasing(client):
    first = (await client.get("/api/health")).json()["uptime"]
    second = (await client.get("/api/health")).json()["uptime"]
    assert isinstance(first, float)
    assert 0 <= first <= second


async def test_health_uptime_tracks_app_start(production_app, client):
    production_app.state.started_at -= 60
    res = await client.get("/api/health")
    assert res.json()["uptime"] >= 60
