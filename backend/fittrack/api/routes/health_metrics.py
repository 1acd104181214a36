"""Health metrics API: heart rate, steps and calories per day. Entries are immutable."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from fittrack.api.deps import get_current_user, get_storage, get_today
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User
from fittrack.schemas.health_metric import HealthMetricCreate, HealthMetricResponse

router = APIRouter(prefix="/health-metrics", tags=["health-metrics"])


@router.get(
    "",
    response_model=list[HealthMetricResponse],
    summary="List health metrics",
    responses={401: {"description": "Not authenticated"}},
)
async def list_health_metrics(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await storage.get_health_metrics(user.id)


@router.get(
    "/today",
    response_model=list[HealthMetricResponse],
    summary="Today's health metrics",
    responses={401: {"description": "Not authenticated"}},
)
async def list_today_health_metrics(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    today: Annotated[date, Depends(get_today)],
):
    return await storage.get_today_health_metrics(user.id, today)


@router.post(
    "",
    response_model=HealthMetricResponse,
    status_code=201,
    summary="Record health metric",
    responses={400: {"description": "Invalid metric or unknown workout"}, 401: {"description": "Not authenticated"}},
)
async def create_health_metric(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: HealthMetricCreate,
):
    """Record one reading; workout_id, when given, must be one of the user's workouts."""
    if body.workout_id is not None:
        workout = await storage.get_workout(body.workout_id)
        if not workout or workout.user_id != user.id:
            raise HTTPException(status_code=400, detail="Workout not found")
    return await storage.create_health_metric({**body.model_dump(), "user_id": user.id})
