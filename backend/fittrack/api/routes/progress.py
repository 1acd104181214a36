"""Progress report endpoint: aggregates workouts, health metrics and hikes of the current user."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from fittrack.api.deps import get_current_user, get_storage, get_today
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User
from fittrack.schemas.progress import ProgressReport
from fittrack.services.progress import DEFAULT_WINDOW_DAYS, build_progress_report

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get(
    "",
    response_model=ProgressReport,
    summary="Progress report",
    responses={401: {"description": "Not authenticated"}},
)
async def get_progress(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    today: Annotated[date, Depends(get_today)],
    days: int = Query(default=DEFAULT_WINDOW_DAYS, ge=1, le=31),
) -> dict:
    """Totals, daily calories/steps for the trailing window, workout mix and achievements."""
    workouts = await storage.get_workouts(user.id)
    metrics = await storage.get_health_metrics(user.id)
    hikes = await storage.get_hiking_sessions(user.id)
    return build_progress_report(workouts, metrics, hikes, today, days)
