"""Tests for health metrics: record, list, today filter, workout link ownership."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient


def _today():
    return datetime.now(timezone.utc).date()


@pytest.mark.asyncio
async def test_record_and_list(client: AsyncClient, auth_headers: dict, test_user):
    user_id, _, _ = test_user
    resp = await client.post(
        "/api/health-metrics",
        json={"date": _today().isoformat(), "steps": 8200, "calories_burned": 410, "heart_rate_post": 132},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["user_id"] == user_id
    assert data["steps"] == 8200
    assert data["workout_id"] is None

    listed = await client.get("/api/health-metrics", headers=auth_headers)
    assert [m["id"] for m in listed.json()] == [data["id"]]


@pytest.mark.asyncio
async def test_list_latest_date_first(client: AsyncClient, auth_headers: dict):
    today = _today()
    for offset in (2, 0, 1):
        await client.post(
            "/api/health-metrics",
            json={"date": (today - timedelta(days=offset)).isoformat(), "steps": offset},
            headers=auth_headers,
        )
    listed = (await client.get("/api/health-metrics", headers=auth_headers)).json()
    assert [m["steps"] for m in listed] == [0, 1, 2]


@pytest.mark.asyncio
async def test_today_filter(client: AsyncClient, auth_headers: dict):
    today = _today()
    await client.post("/api/health-metrics", json={"date": today.isoformat(), "steps": 100}, headers=auth_headers)
    await client.post("/api/health-metrics", json={"date": today.isoformat(), "steps": 200}, headers=auth_headers)
    await client.post(
        "/api/health-metrics",
        json={"date": (today - timedelta(days=1)).isoformat(), "steps": 999},
        headers=auth_headers,
    )
    resp = await client.get("/api/health-metrics/today", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert sorted(m["steps"] for m in data) == [100, 200]
    assert all(m["date"] == today.isoformat() for m in data)


@pytest.mark.asyncio
async def test_link_own_workout(client: AsyncClient, auth_headers: dict):
    w = (await client.post("/api/workouts", json={"name": "Run", "type": "cardio"}, headers=auth_headers)).json()
    resp = await client.post(
        "/api/health-metrics",
        json={"date": _today().isoformat(), "heart_rate_pre": 60, "workout_id": w["id"]},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["workout_id"] == w["id"]


@pytest.mark.asyncio
async def test_link_other_users_workout(client: AsyncClient, auth_headers: dict, other_headers: dict):
    w = (await client.post("/api/workouts", json={"name": "Run", "type": "cardio"}, headers=other_headers)).json()
    resp = await client.post(
        "/api/health-metrics",
        json={"date": _today().isoformat(), "workout_id": w["id"]},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "Workout not found"}


@pytest.mark.asyncio
async def test_negative_steps_rejected(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/health-metrics", json={"date": _today().isoformat(), "steps": -5}, headers=auth_headers
    )
    assert resp.status_code == 400
    assert "steps" in resp.json()["message"]
    listed = await client.get("/api/health-metrics", headers=auth_headers)
    assert listed.json() == []


@pytest.mark.asyncio
async def test_missing_date_rejected(client: AsyncClient, auth_headers: dict):
    resp = await client.post("/api/health-metrics", json={"steps": 10}, headers=auth_headers)
    assert resp.status_code == 400
    assert "date" in resp.json()["message"]
    listed = await client.get("/api/health-metrics", headers=auth_headers)
    assert listed.json() == []
