from typing import Annotated

from fastapi import APIRouter, Depends

from fittrack.api.deps import get_current_user, get_storage
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User
from fittrack.schemas.hiking import HikingSessionCreate, HikingSessionResponse

router = APIRouter(prefix="/hiking", tags=["hiking"])


@router.get(
    "",
    response_model=list[HikingSessionResponse],
    summary="List hiking sessions",
    responses={401: {"description": "Not authenticated"}},
)
async def list_hiking_sessions(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await storage.get_hiking_sessions(user.id)


@router.get(
    "/recent",
    response_model=list[HikingSessionResponse],
    summary="Three most recent hikes",
    responses={401: {"description": "Not authenticated"}},
)
async def list_recent_hiking_sessions(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await storage.get_recent_hiking_sessions(user.id)


@router.post(
    "",
    response_model=HikingSessionResponse,
    status_code=201,
    summary="Log hiking session",
    responses={400: {"description": "Invalid hiking session"}, 401: {"description": "Not authenticated"}},
)
async def create_hiking_session(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: HikingSessionCreate,
):
    return await storage.create_hiking_session({**body.model_dump(), "user_id": user.id})
