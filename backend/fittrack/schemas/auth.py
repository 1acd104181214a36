"""Pydantic schemas for identity sync and session refresh."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CallbackBody(BaseModel):
    id_token: str


class SessionBody(BaseModel):
    session_id: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    created_at: datetime
    updated_at: datetime


class TokenResponse(BaseModel):
    access_token: str
    session_id: str
    token_type: str = "bearer"
    expires_in: int  # seconds until access token expires
    user: UserOut
