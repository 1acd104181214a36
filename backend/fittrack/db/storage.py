"""Data access: one method per entity per operation, bound to a single AsyncSession.

A DatabaseStorage is built per request (see fittrack.api.deps.get_storage) so handlers
never reach for a module-level store. Writes commit immediately and return the
refreshed row; update-style operations return None when the id is unknown.
"""

import logging
from datetime import date, datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.db.base import utcnow
from fittrack.models.fitness_profile import FitnessProfile
from fittrack.models.health_metric import HealthMetric
from fittrack.models.hiking_session import HikingSession
from fittrack.models.login_session import LoginSession
from fittrack.models.notification import Notification
from fittrack.models.user import User
from fittrack.models.workout import Workout

logger = logging.getLogger(__name__)

UPCOMING_WORKOUTS_LIMIT = 5
RECENT_HIKES_LIMIT = 3

_USER_SYNC_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


class DatabaseStorage:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _add(self, row):
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        return row

    async def _save(self, row):
        await self.session.commit()
        await self.session.refresh(row)
        return row

    async def _get_owned(self, model, row_id: str, user_id: str | None):
        q = select(model).where(model.id == row_id)
        if user_id is not None:
            q = q.where(model.user_id == user_id)
        r = await self.session.execute(q)
        return r.scalar_one_or_none()

    # Users

    async def get_user(self, user_id: str) -> User | None:
        r = await self.session.execute(select(User).where(User.id == user_id))
        return r.scalar_one_or_none()

    async def upsert_user(self, data: dict[str, Any]) -> User:
        """Insert the user or overwrite the synced fields when the id already exists."""
        values = {k: data.get(k) for k in _USER_SYNC_FIELDS}
        values["id"] = data["id"]
        now = utcnow()
        dialect = self.session.get_bind().dialect.name
        insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
        stmt = insert(User).values(**values, created_at=now, updated_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.id],
            set_={**{k: values[k] for k in _USER_SYNC_FIELDS}, "updated_at": now},
        ).returning(User)
        r = await self.session.execute(
            select(User).from_statement(stmt).execution_options(populate_existing=True)
        )
        user = r.scalar_one()
        await self.session.commit()
        logger.info("Synced user id=%s", user.id)
        return user

    async def delete_user(self, user_id: str) -> bool:
        """Delete a user; profiles, workouts, metrics, hikes and notifications go with it."""
        r = await self.session.execute(delete(User).where(User.id == user_id))
        await self.session.commit()
        self.session.expire_all()
        return r.rowcount > 0

    # Login sessions

    async def create_login_session(
        self, sid: str, user_id: str, claims: dict[str, Any], expire: datetime
    ) -> LoginSession:
        return await self._add(LoginSession(sid=sid, sess={"user_id": user_id, "claims": claims}, expire=expire))

    async def get_login_session(self, sid: str) -> LoginSession | None:
        """Session by hashed id, only while not expired."""
        r = await self.session.execute(
            select(LoginSession).where(LoginSession.sid == sid, LoginSession.expire > utcnow())
        )
        return r.scalar_one_or_none()

    async def delete_login_session(self, sid: str) -> bool:
        r = await self.session.execute(delete(LoginSession).where(LoginSession.sid == sid))
        await self.session.commit()
        return r.rowcount > 0

    # Fitness profiles

    async def get_fitness_profile(self, user_id: str) -> FitnessProfile | None:
        """Newest profile of the user; older rows (if any) are ignored."""
        r = await self.session.execute(
            select(FitnessProfile)
            .where(FitnessProfile.user_id == user_id)
            .order_by(FitnessProfile.created_at.desc(), FitnessProfile.id.desc())
            .limit(1)
        )
        return r.scalar_one_or_none()

    async def get_fitness_profile_by_id(self, profile_id: str) -> FitnessProfile | None:
        return await self._get_owned(FitnessProfile, profile_id, None)

    async def create_fitness_profile(self, data: dict[str, Any]) -> FitnessProfile:
        return await self._add(FitnessProfile(**data))

    async def update_fitness_profile(
        self, profile_id: str, data: dict[str, Any], user_id: str | None = None
    ) -> FitnessProfile | None:
        profile = await self._get_owned(FitnessProfile, profile_id, user_id)
        if not profile:
            return None
        for key, value in data.items():
            setattr(profile, key, value)
        profile.updated_at = utcnow()
        return await self._save(profile)

    # Workouts

    async def get_workouts(self, user_id: str) -> list[Workout]:
        r = await self.session.execute(
            select(Workout)
            .where(Workout.user_id == user_id)
            .order_by(Workout.scheduled_date.desc().nulls_last(), Workout.created_at.desc())
        )
        return list(r.scalars().all())

    async def get_workout(self, workout_id: str) -> Workout | None:
        return await self._get_owned(Workout, workout_id, None)

    async def get_upcoming_workouts(self, user_id: str, today: date) -> list[Workout]:
        r = await self.session.execute(
            select(Workout)
            .where(Workout.user_id == user_id, Workout.scheduled_date >= today)
            .order_by(Workout.scheduled_date.asc(), Workout.created_at.asc())
            .limit(UPCOMING_WORKOUTS_LIMIT)
        )
        return list(r.scalars().all())

    async def create_workout(self, data: dict[str, Any]) -> Workout:
        return await self._add(Workout(**data))

    async def update_workout(
        self, workout_id: str, data: dict[str, Any], user_id: str | None = None
    ) -> Workout | None:
        workout = await self._get_owned(Workout, workout_id, user_id)
        if not workout:
            return None
        for key, value in data.items():
            setattr(workout, key, value)
        return await self._save(workout)

    async def mark_workout_complete(self, workout_id: str, user_id: str | None = None) -> Workout | None:
        """Set completed=True; calling it again on a completed workout is a no-op."""
        return await self.update_workout(workout_id, {"completed": True}, user_id=user_id)

    async def delete_workout(self, workout_id: str) -> bool:
        """Delete a workout; health metrics pointing at it keep existing with workout_id NULL."""
        r = await self.session.execute(delete(Workout).where(Workout.id == workout_id))
        await self.session.commit()
        self.session.expire_all()
        return r.rowcount > 0

    # Health metrics

    async def get_health_metrics(self, user_id: str) -> list[HealthMetric]:
        r = await self.session.execute(
            select(HealthMetric)
            .where(HealthMetric.user_id == user_id)
            .order_by(HealthMetric.date.desc(), HealthMetric.created_at.desc())
        )
        return list(r.scalars().all())

    async def get_health_metric(self, metric_id: str) -> HealthMetric | None:
        return await self._get_owned(HealthMetric, metric_id, None)

    async def get_today_health_metrics(self, user_id: str, today: date) -> list[HealthMetric]:
        r = await self.session.execute(
            select(HealthMetric)
            .where(HealthMetric.user_id == user_id, HealthMetric.date == today)
            .order_by(HealthMetric.created_at.desc())
        )
        return list(r.scalars().all())

    async def create_health_metric(self, data: dict[str, Any]) -> HealthMetric:
        return await self._add(HealthMetric(**data))

    # Hiking sessions

    async def get_hiking_sessions(self, user_id: str) -> list[HikingSession]:
        r = await self.session.execute(
            select(HikingSession)
            .where(HikingSession.user_id == user_id)
            .order_by(HikingSession.date.desc(), HikingSession.created_at.desc())
        )
        return list(r.scalars().all())

    async def get_hiking_session(self, hike_id: str) -> HikingSession | None:
        return await self._get_owned(HikingSession, hike_id, None)

    async def get_recent_hiking_sessions(self, user_id: str) -> list[HikingSession]:
        r = await self.session.execute(
            select(HikingSession)
            .where(HikingSession.user_id == user_id)
            .order_by(HikingSession.date.desc(), HikingSession.created_at.desc())
            .limit(RECENT_HIKES_LIMIT)
        )
        return list(r.scalars().all())

    async def create_hiking_session(self, data: dict[str, Any]) -> HikingSession:
        return await self._add(HikingSession(**data))

    # Notifications

    async def get_notifications(self, user_id: str) -> list[Notification]:
        r = await self.session.execute(
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
        )
        return list(r.scalars().all())

    async def get_notification(self, notification_id: str) -> Notification | None:
        return await self._get_owned(Notification, notification_id, None)

    async def get_unread_notifications(self, user_id: str) -> list[Notification]:
        r = await self.session.execute(
            select(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
            .order_by(Notification.created_at.desc())
        )
        return list(r.scalars().all())

    async def create_notification(self, data: dict[str, Any]) -> Notification:
        return await self._add(Notification(**data))

    async def mark_notification_read(
        self, notification_id: str, user_id: str | None = None
    ) -> Notification | None:
        """Set read=True; idempotent."""
        notification = await self._get_owned(Notification, notification_id, user_id)
        if not notification:
            return None
        notification.read = True
        return await self._save(notification)
