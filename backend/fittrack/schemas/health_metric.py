from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class HealthMetricCreate(BaseModel):
    date: date
    heart_rate_pre: int | None = Field(None, ge=0, le=300)
    heart_rate_post: int | None = Field(None, ge=0, le=300)
    steps: int | None = Field(None, ge=0)
    calories_burned: int | None = Field(None, ge=0)
    workout_id: str | None = None
    notes: str | None = None


class HealthMetricResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    date: date
    heart_rate_pre: int | None
    heart_rate_post: int | None
    steps: int | None
    calories_burned: int | None
    workout_id: str | None
    notes: str | None
    created_at: datetime
