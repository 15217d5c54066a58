"""Pydantic schemas for request/response validation."""

from liftlog.schemas.auth import AuthRequest, AuthResponse
from liftlog.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate

__all__ = [
    "AuthRequest",
    "AuthResponse",
    "WorkoutCreate",
    "WorkoutRead",
    "WorkoutUpdate",
]
