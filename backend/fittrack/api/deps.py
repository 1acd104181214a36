"""FastAPI dependencies: storage handle, current user from JWT, caller's "today"."""

from datetime import date, datetime, timezone
from typing import Annotated
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends, HTTPException, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.config import settings
from fittrack.core.auth import decode_token
from fittrack.db.session import get_db
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User


async def get_storage(
    session: Annotated[AsyncSession, Depends(get_db)],
) -> DatabaseStorage:
    return DatabaseStorage(session)


async def get_current_user(
    request: Request,
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
) -> User:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Not authenticated")
    token = auth_header[7:].strip()
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        payload = decode_token(token)
    except Exception:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token")
    user = await storage.get_user(str(user_id))
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


def get_today(
    tz: Annotated[str | None, Query(description="IANA time zone for 'today', e.g. Europe/Berlin")] = None,
) -> date:
    """Current calendar date in the caller's time zone (settings.default_timezone if not given)."""
    name = tz or settings.default_timezone
    if name.upper() == "UTC":
        return datetime.now(timezone.utc).date()
    try:
        zone = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail=f"Unknown time zone: {name}")
    return datetime.now(zone).date()
