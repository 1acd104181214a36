from fittrack.models.user import User
from fittrack.models.login_session import LoginSession
from fittrack.models.fitness_profile import FitnessProfile
from fittrack.models.workout import Workout
from fittrack.models.health_metric import HealthMetric
from fittrack.models.hiking_session import HikingSession
from fittrack.models.notification import Notification

__all__ = [
    "User",
    "LoginSession",
    "FitnessProfile",
    "Workout",
    "HealthMetric",
    "HikingSession",
    "Notification",
]
