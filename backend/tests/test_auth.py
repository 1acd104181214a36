"""Tests for auth endpoints: identity callback (user upsert), refresh, logout, current user."""

import pytest
from httpx import AsyncClient
from jose import jwt

from fittrack.config import settings


def _id_token(**claims) -> str:
    return jwt.encode(claims, settings.idp_secret, algorithm=settings.idp_algorithm)


@pytest.mark.asyncio
async def test_callback_creates_user(client: AsyncClient, clean_db):
    resp = await client.post(
        "/api/auth/callback",
        json={"id_token": _id_token(sub="idp-user-1", email="hiker@test.com", first_name="Ana")},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["user"]["id"] == "idp-user-1"
    assert data["user"]["email"] == "hiker@test.com"
    assert data["user"]["first_name"] == "Ana"
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["session_id"]


@pytest.mark.asyncio
async def test_callback_twice_overwrites_user(client: AsyncClient, clean_db):
    await client.post(
        "/api/auth/callback",
        json={"id_token": _id_token(sub="idp-user-2", email="old@test.com", first_name="Old")},
    )
    resp = await client.post(
        "/api/auth/callback",
        json={"id_token": _id_token(sub="idp-user-2", email="new@test.com", first_name="New")},
    )
    assert resp.status_code == 200
    token = resp.json()["access_token"]
    me = await client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "new@test.com"
    assert me.json()["first_name"] == "New"


@pytest.mark.asyncio
async def test_callback_invalid_token(client: AsyncClient, clean_db):
    bad = jwt.encode({"sub": "x"}, "wrong-secret", algorithm="HS256")
    resp = await client.post("/api/auth/callback", json={"id_token": bad})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid ID token"


@pytest.mark.asyncio
async def test_callback_email_taken_by_other_user(client: AsyncClient, test_user):
    resp = await client.post(
        "/api/auth/callback",
        json={"id_token": _id_token(sub="someone-else", email="test@test.com")},
    )
    assert resp.status_code == 400
    assert "message" in resp.json()


@pytest.mark.asyncio
async def test_refresh_and_logout(client: AsyncClient, clean_db):
    login = await client.post(
        "/api/auth/callback",
        json={"id_token": _id_token(sub="idp-user-3", email="r@test.com")},
    )
    session_id = login.json()["session_id"]
    refreshed = await client.post("/api/auth/refresh", json={"session_id": session_id})
    assert refreshed.status_code == 200
    token = refreshed.json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    out = await client.post("/api/logout", json={"session_id": session_id}, headers=headers)
    assert out.status_code == 204
    again = await client.post("/api/auth/refresh", json={"session_id": session_id})
    assert again.status_code == 401


@pytest.mark.asyncio
async def test_refresh_unknown_session(client: AsyncClient, clean_db):
    resp = await client.post("/api/auth/refresh", json={"session_id": "nope"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid or expired session"


@pytest.mark.asyncio
async def test_current_user(client: AsyncClient, auth_headers: dict):
    resp = await client.get("/api/auth/user", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == "test@test.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/auth/user"),
        ("get", "/api/fitness-profile"),
        ("get", "/api/workouts"),
        ("get", "/api/workouts/upcoming"),
        ("get", "/api/health-metrics/today"),
        ("get", "/api/hiking/recent"),
        ("get", "/api/notifications/unread"),
        ("get", "/api/progress"),
        ("patch", "/api/workouts/abc/complete"),
    ],
)
async def test_unauthenticated_rejected(client: AsyncClient, method: str, path: str):
    resp = await getattr(client, method)(path)
    assert resp.status_code == 401
    assert resp.json() == {"message": "Not authenticated"}


@pytest.mark.asyncio
async def test_invalid_bearer_token(client: AsyncClient, clean_db):
    resp = await client.get("/api/workouts", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_health_is_public(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
