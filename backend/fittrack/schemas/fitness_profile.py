"""Pydantic schemas for the fitness profile API."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FitnessGoal = Literal["weight_loss", "muscle_gain", "endurance", "general_health"]
FitnessLevel = Literal["beginner", "intermediate", "advanced"]


class FitnessProfileCreate(BaseModel):
    """Body for creating a profile. Owner comes from the token; any user_id sent is ignored."""

    gender: str | None = Field(None, max_length=20)
    age: int | None = Field(None, ge=1, le=150)
    weight: Decimal | None = Field(None, ge=0, max_digits=5, decimal_places=2, description="kg")
    height: Decimal | None = Field(None, ge=0, max_digits=5, decimal_places=2, description="cm")
    fitness_goal: FitnessGoal | None = None
    fitness_level: FitnessLevel | None = None
    preferences: str | None = None


class FitnessProfileUpdate(FitnessProfileCreate):
    """Partial update: only fields present in the body are written."""


class FitnessProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    gender: str | None
    age: int | None
    weight: Decimal | None
    height: Decimal | None
    fitness_goal: str | None
    fitness_level: str | None
    preferences: str | None
    created_at: datetime
    updated_at: datetime
