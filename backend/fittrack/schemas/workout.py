"""Pydantic schemas for workout API."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

WorkoutType = Literal["chest", "legs", "back", "arms", "cardio", "full_body", "rest"]


class WorkoutCreate(BaseModel):
    """Body for scheduling a workout."""

    name: str = Field(..., min_length=1, max_length=100)
    type: WorkoutType
    description: str | None = None
    exercises: str | None = None
    duration: int | None = Field(None, ge=0, description="Minutes")
    scheduled_date: date | None = None
    completed: bool = False


class WorkoutUpdate(BaseModel):
    """Body for updating a workout (partial)."""

    name: str | None = Field(None, min_length=1, max_length=100)
    type: WorkoutType | None = None
    description: str | None = None
    exercises: str | None = None
    duration: int | None = Field(None, ge=0)
    scheduled_date: date | None = None

    @field_validator("name", "type")
    @classmethod
    def not_null(cls, v):
        # Columns are NOT NULL: omit the field to keep it, null is not a value
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class WorkoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    type: str
    description: str | None
    exercises: str | None
    duration: int | None
    scheduled_date: date | None
    completed: bool
    created_at: datetime
