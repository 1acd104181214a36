"""Pydantic schemas for hiking sessions (immutable once logged)."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class HikingSessionCreate(BaseModel):
    date: date
    distance: Decimal | None = Field(None, ge=0, max_digits=6, decimal_places=2, description="km")
    elevation_gain: Decimal | None = Field(None, ge=0, max_digits=6, decimal_places=2, description="m")
    duration: int | None = Field(None, ge=0, description="Minutes")
    calories_burned: int | None = Field(None, ge=0)
    route_name: str | None = Field(None, max_length=200)
    notes: str | None = None


class HikingSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    date: date
    distance: Decimal | None
    elevation_gain: Decimal | None
    duration: int | None
    calories_burned: int | None
    route_name: str | None
    notes: str | None
    created_at: datetime
