"""Workout reminders: one notification per user for incomplete workouts scheduled today."""

import logging
from collections import defaultdict
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.config import settings
from fittrack.db.storage import DatabaseStorage
from fittrack.models.notification import Notification
from fittrack.models.workout import Workout

logger = logging.getLogger(__name__)

REMINDER_TYPE = "workout_reminder"
REMINDER_TITLE = "Workout today"


def reminder_message(names: list[str]) -> str:
    if len(names) == 1:
        return f"You have {names[0]} scheduled for today. Let's crush it!"
    return f"You have {len(names)} workouts scheduled for today: {', '.join(names)}."


async def get_workouts_due(session: AsyncSession, today: date) -> dict[str, list[str]]:
    """user_id -> names of incomplete workouts scheduled today, skipping users this job already reminded today."""
    r = await session.execute(
        select(Workout.user_id, Workout.name)
        .where(Workout.scheduled_date == today, Workout.completed.is_(False))
        .order_by(Workout.created_at)
    )
    due: dict[str, list[str]] = defaultdict(list)
    for user_id, name in r.all():
        due[user_id].append(name)
    if not due:
        return {}

    day_start = datetime.combine(today, time.min).replace(tzinfo=timezone.utc)
    day_end = day_start + timedelta(days=1)
    r_sent = await session.execute(
        select(Notification.user_id)
        .where(
            Notification.type == REMINDER_TYPE,
            Notification.title == REMINDER_TITLE,
            Notification.user_id.in_(list(due)),
            Notification.created_at >= day_start,
            Notification.created_at < day_end,
        )
        .distinct()
    )
    for (user_id,) in r_sent.all():
        due.pop(user_id, None)
    return dict(due)


async def create_workout_reminders(session: AsyncSession, today: date) -> int:
    """Create today's reminders; returns how many were created. Safe to run twice a day."""
    due = await get_workouts_due(session, today)
    storage = DatabaseStorage(session)
    scheduled_for = datetime.combine(today, time(hour=settings.reminder_cron_hour)).replace(tzinfo=timezone.utc)
    for user_id, names in due.items():
        await storage.create_notification(
            {
                "user_id": user_id,
                "type": REMINDER_TYPE,
                "title": REMINDER_TITLE,
                "message": reminder_message(names),
                "scheduled_for": scheduled_for,
            }
        )
        logger.info("Reminders: workout reminder for user_id=%s (%d workouts)", user_id, len(names))
    return len(due)


async def run_workout_reminder_job() -> None:
    """Scheduled job entry point: opens its own session."""
    from fittrack.db.session import async_session_maker

    today = datetime.now(timezone.utc).date()
    async with async_session_maker() as session:
        try:
            created = await create_workout_reminders(session, today)
            if not created:
                logger.debug("Reminders: no workouts due today")
        except Exception as e:
            logger.exception("Reminders: workout reminder job failed: %s", e)
            await session.rollback()
