"""SQLAlchemy models."""

from liftlog.models.user import User
from liftlog.models.workout import Workout

__all__ = [
    "User",
    "Workout",
]
