"""Notifications API: list, unread, create, mark read."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from fittrack.api.deps import get_current_user, get_storage
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User
from fittrack.schemas.notification import NotificationCreate, NotificationResponse

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get(
    "",
    response_model=list[NotificationResponse],
    summary="List notifications",
    responses={401: {"description": "Not authenticated"}},
)
async def list_notifications(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await storage.get_notifications(user.id)


@router.get(
    "/unread",
    response_model=list[NotificationResponse],
    summary="List unread notifications",
    responses={401: {"description": "Not authenticated"}},
)
async def list_unread_notifications(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
):
    return await storage.get_unread_notifications(user.id)


@router.post(
    "",
    response_model=NotificationResponse,
    status_code=201,
    summary="Create notification",
    responses={400: {"description": "Invalid notification"}, 401: {"description": "Not authenticated"}},
)
async def create_notification(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: NotificationCreate,
):
    return await storage.create_notification({**body.model_dump(), "user_id": user.id})


@router.patch(
    "/{notification_id}/read",
    response_model=NotificationResponse,
    summary="Mark notification read",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Notification not found"}},
)
async def mark_notification_read(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    notification_id: str,
):
    n = await storage.mark_notification_read(notification_id, user_id=user.id)
    if not n:
        raise HTTPException(status_code=404, detail="Notification not found")
    return n
