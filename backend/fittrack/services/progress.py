"""Progress report: totals, trailing daily buckets, workout mix and achievement badges.

All functions are pure and work on rows already loaded for one user. Achievements are
threshold checks recomputed on every call; nothing is persisted.
"""

from collections import Counter
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from fittrack.models.health_metric import HealthMetric
from fittrack.models.hiking_session import HikingSession
from fittrack.models.workout import Workout

WORKOUT_WARRIOR_MIN_COMPLETED = 5
STEP_MASTER_MIN_STEPS = 50_000
MOUNTAIN_EXPLORER_MIN_HIKES = 3

DEFAULT_WINDOW_DAYS = 7


@dataclass(frozen=True)
class Achievement:
    key: str
    title: str
    description: str
    unlocked: bool


def summarize(
    workouts: Sequence[Workout],
    metrics: Sequence[HealthMetric],
    hikes: Sequence[HikingSession],
) -> dict:
    completed = sum(1 for w in workouts if w.completed)
    total_calories = sum(m.calories_burned or 0 for m in metrics)
    total_steps = sum(m.steps or 0 for m in metrics)
    # Post-workout reading wins; pre-workout is the fallback, missing counts as 0
    avg_heart_rate = (
        round(sum(m.heart_rate_post or m.heart_rate_pre or 0 for m in metrics) / len(metrics))
        if metrics
        else 0
    )
    return {
        "completed_workouts": completed,
        "total_workouts": len(workouts),
        "total_hikes": len(hikes),
        "total_calories": total_calories,
        "total_steps": total_steps,
        "avg_heart_rate": avg_heart_rate,
    }


def last_n_days(
    metrics: Iterable[HealthMetric],
    today: date,
    days: int = DEFAULT_WINDOW_DAYS,
) -> list[dict]:
    """Calories and steps per calendar day for the window ending today, oldest first."""
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    calories: dict[date, int] = {d: 0 for d in window}
    steps: dict[date, int] = {d: 0 for d in window}
    for m in metrics:
        if m.date in calories:
            calories[m.date] += m.calories_burned or 0
            steps[m.date] += m.steps or 0
    return [
        {
            "date": d.isoformat(),
            "weekday": d.strftime("%a"),
            "calories": calories[d],
            "steps": steps[d],
        }
        for d in window
    ]


def workout_type_counts(workouts: Iterable[Workout]) -> dict[str, int]:
    return dict(Counter(w.type or "other" for w in workouts))


def achievements(summary: dict) -> list[Achievement]:
    return [
        Achievement(
            key="workout_warrior",
            title="Workout Warrior",
            description=f"Completed {WORKOUT_WARRIOR_MIN_COMPLETED}+ workouts",
            unlocked=summary["completed_workouts"] >= WORKOUT_WARRIOR_MIN_COMPLETED,
        ),
        Achievement(
            key="step_master",
            title="Step Master",
            description=f"Walked {STEP_MASTER_MIN_STEPS:,}+ steps",
            unlocked=summary["total_steps"] >= STEP_MASTER_MIN_STEPS,
        ),
        Achievement(
            key="mountain_explorer",
            title="Mountain Explorer",
            description=f"Completed {MOUNTAIN_EXPLORER_MIN_HIKES}+ hikes",
            unlocked=summary["total_hikes"] >= MOUNTAIN_EXPLORER_MIN_HIKES,
        ),
    ]


def build_progress_report(
    workouts: Sequence[Workout],
    metrics: Sequence[HealthMetric],
    hikes: Sequence[HikingSession],
    today: date,
    days: int = DEFAULT_WINDOW_DAYS,
) -> dict:
    summary = summarize(workouts, metrics, hikes)
    return {
        "summary": summary,
        "daily": last_n_days(metrics, today, days),
        "workout_types": workout_type_counts(workouts),
        "achievements": [asdict(a) for a in achievements(summary)],
    }
