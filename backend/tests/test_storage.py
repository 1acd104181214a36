"""DatabaseStorage tests: user upsert, delete cascades, workout delete keeps linked metrics."""

from datetime import date, datetime, timedelta, timezone

import pytest

from fittrack.db.storage import DatabaseStorage


@pytest.mark.asyncio
async def test_upsert_user_overwrites(storage: DatabaseStorage):
    await storage.upsert_user({"id": "u-1", "email": "a@test.com", "first_name": "A"})
    user = await storage.upsert_user({"id": "u-1", "email": "b@test.com"})
    assert user.email == "b@test.com"
    assert user.first_name is None
    again = await storage.get_user("u-1")
    assert again.email == "b@test.com"


@pytest.mark.asyncio
async def test_delete_user_cascades(storage: DatabaseStorage):
    await storage.upsert_user({"id": "u-del", "email": "del@test.com"})
    await storage.create_fitness_profile({"user_id": "u-del", "age": 33})
    workout = await storage.create_workout({"user_id": "u-del", "name": "Push", "type": "chest"})
    await storage.create_health_metric({"user_id": "u-del", "date": date(2026, 1, 2), "workout_id": workout.id})
    await storage.create_hiking_session({"user_id": "u-del", "date": date(2026, 1, 3)})
    await storage.create_notification(
        {"user_id": "u-del", "type": "motivational", "title": "Hi", "message": "Go"}
    )

    assert await storage.delete_user("u-del") is True

    assert await storage.get_user("u-del") is None
    assert await storage.get_fitness_profile("u-del") is None
    assert await storage.get_workouts("u-del") == []
    assert await storage.get_health_metrics("u-del") == []
    assert await storage.get_hiking_sessions("u-del") == []
    assert await storage.get_notifications("u-del") == []


@pytest.mark.asyncio
async def test_delete_unknown_user(storage: DatabaseStorage):
    assert await storage.delete_user("ghost") is False


@pytest.mark.asyncio
async def test_delete_workout_unlinks_metrics(storage: DatabaseStorage):
    await storage.upsert_user({"id": "u-w", "email": "w@test.com"})
    workout = await storage.create_workout({"user_id": "u-w", "name": "Run", "type": "cardio"})
    workout_id = workout.id
    await storage.create_health_metric({"user_id": "u-w", "date": date(2026, 2, 1), "steps": 4000, "workout_id": workout_id})

    assert await storage.delete_workout(workout_id) is True

    assert await storage.get_workout(workout_id) is None
    metrics = await storage.get_health_metrics("u-w")
    assert len(metrics) == 1
    assert metrics[0].workout_id is None
    assert metrics[0].steps == 4000


@pytest.mark.asyncio
async def test_update_scoped_to_owner(storage: DatabaseStorage):
    await storage.upsert_user({"id": "u-a", "email": "ua@test.com"})
    workout = await storage.create_workout({"user_id": "u-a", "name": "Row", "type": "back"})
    assert await storage.mark_workout_complete(workout.id, user_id="u-b") is None
    done = await storage.mark_workout_complete(workout.id, user_id="u-a")
    assert done.completed is True


@pytest.mark.asyncio
async def test_login_session_expiry(storage: DatabaseStorage):
    await storage.upsert_user({"id": "u-s", "email": "s@test.com"})
    now = datetime.now(timezone.utc)
    await storage.create_login_session("live", "u-s", {"sub": "u-s"}, now + timedelta(days=1))
    await storage.create_login_session("stale", "u-s", {"sub": "u-s"}, now - timedelta(seconds=1))

    live = await storage.get_login_session("live")
    assert live.sess["user_id"] == "u-s"
    assert await storage.get_login_session("stale") is None
    assert await storage.delete_login_session("live") is True
    assert await storage.get_login_session("live") is None


@pytest.mark.asyncio
async def test_get_by_id(storage: DatabaseStorage):
    await storage.upsert_user({"id": "u-g", "email": "g@test.com"})
    metric = await storage.create_health_metric({"user_id": "u-g", "date": date(2026, 2, 2), "steps": 10})
    hike = await storage.create_hiking_session({"user_id": "u-g", "date": date(2026, 2, 3), "route_name": "Loop"})
    note = await storage.create_notification(
        {"user_id": "u-g", "type": "achievement", "title": "Badge", "message": "Step Master"}
    )

    assert (await storage.get_health_metric(metric.id)).steps == 10
    assert (await storage.get_hiking_session(hike.id)).route_name == "Loop"
    assert (await storage.get_notification(note.id)).title == "Badge"
    assert await storage.get_health_metric("missing") is None
    assert await storage.get_hiking_session("missing") is None
    assert await storage.get_notification("missing") is None
