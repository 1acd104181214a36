"""Fitness profile: GET newest profile, POST create, PUT partial update."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from fittrack.api.deps import get_current_user, get_storage
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User
from fittrack.schemas.fitness_profile import (
    FitnessProfileCreate,
    FitnessProfileResponse,
    FitnessProfileUpdate,
)

router = APIRouter(prefix="/fitness-profile", tags=["fitness-profile"])


@router.get(
    "",
    response_model=FitnessProfileResponse,
    summary="Get fitness profile",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Profile not found"}},
)
async def get_fitness_profile(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
):
    profile = await storage.get_fitness_profile(user.id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post(
    "",
    response_model=FitnessProfileResponse,
    status_code=201,
    summary="Create fitness profile",
    responses={400: {"description": "Invalid profile"}, 401: {"description": "Not authenticated"}},
)
async def create_fitness_profile(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: FitnessProfileCreate,
):
    return await storage.create_fitness_profile({**body.model_dump(), "user_id": user.id})


@router.put(
    "/{profile_id}",
    response_model=FitnessProfileResponse,
    summary="Update fitness profile",
    responses={
        400: {"description": "Invalid profile"},
        401: {"description": "Not authenticated"},
        404: {"description": "Profile not found"},
    },
)
async def update_fitness_profile(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    profile_id: str,
    body: FitnessProfileUpdate,
):
    """Overwrite only the fields present in the body."""
    profile = await storage.update_fitness_profile(
        profile_id, body.model_dump(exclude_unset=True), user_id=user.id
    )
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile
