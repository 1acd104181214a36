"""Workouts API: schedule, list, upcoming, update and mark complete."""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from fittrack.api.deps import get_current_user, get_storage, get_today
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User
from fittrack.schemas.workout import WorkoutCreate, WorkoutResponse, WorkoutUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get(
    "",
    response_model=list[WorkoutResponse],
    summary="List workouts",
    responses={401: {"description": "Not authenticated"}},
)
async def list_workouts(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
):
    """All workouts of the current user, latest scheduled date first."""
    return await storage.get_workouts(user.id)


@router.get(
    "/upcoming",
    response_model=list[WorkoutResponse],
    summary="Upcoming workouts",
    responses={401: {"description": "Not authenticated"}},
)
async def list_upcoming_workouts(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    today: Annotated[date, Depends(get_today)],
):
    """Next five workouts scheduled today or later, soonest first."""
    return await storage.get_upcoming_workouts(user.id, today)


@router.post(
    "",
    response_model=WorkoutResponse,
    status_code=201,
    summary="Create workout",
    responses={400: {"description": "Invalid workout"}, 401: {"description": "Not authenticated"}},
)
async def create_workout(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: WorkoutCreate,
):
    w = await storage.create_workout({**body.model_dump(), "user_id": user.id})
    logger.info("Workout %s scheduled for user_id=%s on %s", w.id, user.id, w.scheduled_date)
    return w


@router.patch(
    "/{workout_id}",
    response_model=WorkoutResponse,
    summary="Update workout",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Workout not found"}},
)
async def update_workout(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    workout_id: str,
    body: WorkoutUpdate,
):
    """Update plan fields of a workout (completion has its own endpoint)."""
    w = await storage.update_workout(workout_id, body.model_dump(exclude_unset=True), user_id=user.id)
    if not w:
        raise HTTPException(status_code=404, detail="Workout not found")
    return w


@router.patch(
    "/{workout_id}/complete",
    response_model=WorkoutResponse,
    summary="Mark workout complete",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Workout not found"}},
)
async def complete_workout(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    workout_id: str,
):
    w = await storage.mark_workout_complete(workout_id, user_id=user.id)
    if not w:
        raise HTTPException(status_code=404, detail="Workout not found")
    return w
