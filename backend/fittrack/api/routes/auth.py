"""Auth: identity-provider callback (user sync), token refresh, logout, current user."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response
from jose import JWTError
from sqlalchemy.exc import IntegrityError

from fittrack.api.deps import get_current_user, get_storage
from fittrack.config import settings
from fittrack.core.auth import (
    claims_to_user,
    create_access_token,
    create_session_id,
    decode_id_token,
    hash_session_id,
)
from fittrack.db.storage import DatabaseStorage
from fittrack.models.user import User
from fittrack.schemas.auth import CallbackBody, SessionBody, TokenResponse, UserOut

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])

ACCESS_TOKEN_EXPIRE_SECONDS = settings.access_token_expire_minutes * 60


def _token_response(user: User, session_id: str) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user.id, user.email),
        session_id=session_id,
        expires_in=ACCESS_TOKEN_EXPIRE_SECONDS,
        user=UserOut.model_validate(user),
    )


@router.post(
    "/auth/callback",
    response_model=TokenResponse,
    summary="Sync user from identity provider ID token",
    responses={
        400: {"description": "Email already used by another account"},
        401: {"description": "Invalid ID token"},
    },
)
async def auth_callback(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    body: CallbackBody,
) -> TokenResponse:
    """Verify the ID token, upsert the user from its claims and open a login session."""
    try:
        claims = decode_id_token(body.id_token)
    except JWTError as e:
        logger.warning("Rejected ID token: %s", e)
        raise HTTPException(status_code=401, detail="Invalid ID token") from e
    if not claims.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid ID token")
    try:
        user = await storage.upsert_user(claims_to_user(claims))
    except IntegrityError as e:
        logger.warning("User sync IntegrityError: %s", e)
        raise HTTPException(status_code=400, detail="Email already registered") from e
    session_id = create_session_id()
    expire = datetime.now(timezone.utc) + timedelta(days=settings.session_expire_days)
    await storage.create_login_session(hash_session_id(session_id), user.id, claims, expire)
    return _token_response(user, session_id)


@router.post(
    "/auth/refresh",
    response_model=TokenResponse,
    summary="Exchange session id for a new access token",
    responses={401: {"description": "Session invalid or expired"}},
)
async def refresh_access_token(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    body: SessionBody,
) -> TokenResponse:
    if not body.session_id.strip():
        raise HTTPException(status_code=401, detail="Session id required")
    login_session = await storage.get_login_session(hash_session_id(body.session_id.strip()))
    if not login_session:
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    user = await storage.get_user(login_session.sess.get("user_id", ""))
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return _token_response(user, body.session_id.strip())


@router.post(
    "/logout",
    status_code=204,
    summary="End login session",
    responses={401: {"description": "Not authenticated"}},
)
async def logout(
    storage: Annotated[DatabaseStorage, Depends(get_storage)],
    user: Annotated[User, Depends(get_current_user)],
    body: SessionBody,
) -> Response:
    sid = hash_session_id(body.session_id.strip())
    login_session = await storage.get_login_session(sid)
    if login_session and login_session.sess.get("user_id") == user.id:
        await storage.delete_login_session(sid)
    return Response(status_code=204)


@router.get(
    "/auth/user",
    response_model=UserOut,
    summary="Get current authenticated user",
    responses={401: {"description": "Not authenticated or invalid token"}},
)
async def current_user(user: Annotated[User, Depends(get_current_user)]):
    return user
