"""Tests for fitness profile: create, read newest, partial update, ownership."""

from decimal import Decimal

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_profile_missing(client: AsyncClient, auth_headers: dict):
    resp = await client.get("/api/fitness-profile", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Profile not found"}


@pytest.mark.asyncio
async def test_create_and_get_profile(client: AsyncClient, auth_headers: dict, test_user):
    user_id, _, _ = test_user
    resp = await client.post(
        "/api/fitness-profile",
        json={
            "gender": "female",
            "age": 31,
            "weight": "72.5",
            "height": 168,
            "fitness_goal": "endurance",
            "fitness_level": "intermediate",
            "user_id": "ignored",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["user_id"] == user_id
    assert Decimal(created["weight"]) == Decimal("72.5")

    got = await client.get("/api/fitness-profile", headers=auth_headers)
    assert got.status_code == 200
    assert got.json()["id"] == created["id"]
    assert got.json()["fitness_goal"] == "endurance"


@pytest.mark.asyncio
async def test_get_returns_newest_profile(client: AsyncClient, auth_headers: dict):
    await client.post("/api/fitness-profile", json={"age": 30}, headers=auth_headers)
    newer = await client.post("/api/fitness-profile", json={"age": 31}, headers=auth_headers)
    got = await client.get("/api/fitness-profile", headers=auth_headers)
    assert got.json()["id"] == newer.json()["id"]
    assert got.json()["age"] == 31


@pytest.mark.asyncio
async def test_create_invalid_goal(client: AsyncClient, auth_headers: dict):
    resp = await client.post("/api/fitness-profile", json={"fitness_goal": "fame"}, headers=auth_headers)
    assert resp.status_code == 400
    assert "fitness_goal" in resp.json()["message"]
    got = await client.get("/api/fitness-profile", headers=auth_headers)
    assert got.status_code == 404


@pytest.mark.asyncio
async def test_update_profile_partial(client: AsyncClient, auth_headers: dict):
    created = (
        await client.post(
            "/api/fitness-profile",
            json={"age": 40, "fitness_level": "beginner", "preferences": "mornings"},
            headers=auth_headers,
        )
    ).json()
    resp = await client.put(
        f"/api/fitness-profile/{created['id']}", json={"fitness_level": "advanced"}, headers=auth_headers
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["fitness_level"] == "advanced"
    assert data["age"] == 40
    assert data["preferences"] == "mornings"
    assert data["updated_at"] >= created["updated_at"]


@pytest.mark.asyncio
async def test_update_unknown_profile(client: AsyncClient, auth_headers: dict):
    resp = await client.put("/api/fitness-profile/nope", json={"age": 20}, headers=auth_headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_other_users_profile(client: AsyncClient, auth_headers: dict, other_headers: dict):
    theirs = (await client.post("/api/fitness-profile", json={"age": 50}, headers=other_headers)).json()
    resp = await client.put(f"/api/fitness-profile/{theirs['id']}", json={"age": 20}, headers=auth_headers)
    assert resp.status_code == 404
    still = await client.get("/api/fitness-profile", headers=other_headers)
    assert still.json()["age"] == 50
