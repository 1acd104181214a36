"""Pydantic schemas for the progress report."""

from pydantic import BaseModel


class ProgressSummary(BaseModel):
    completed_workouts: int
    total_workouts: int
    total_hikes: int
    total_calories: int
    total_steps: int
    avg_heart_rate: int


class DailyBucket(BaseModel):
    date: str
    weekday: str
    calories: int
    steps: int


class AchievementOut(BaseModel):
    key: str
    title: str
    description: str
    unlocked: bool


class ProgressReport(BaseModel):
    summary: ProgressSummary
    daily: list[DailyBucket]
    workout_types: dict[str, int]
    achievements: list[AchievementOut]
