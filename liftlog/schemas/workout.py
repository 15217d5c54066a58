"""Workout schemas for request/response validation."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# load and reps arrive as strings from forms, or as JSON numbers
FieldValue = str | int | float | None


class WorkoutCreate(BaseModel):
    """Body of POST /api/workouts. Presence is checked by the service."""

    title: FieldValue = None
    load: FieldValue = None
    reps: FieldValue = None


class WorkoutUpdate(BaseModel):
    """Partial update; unknown keys (including user_id) are ignored."""

    title: FieldValue = None
    load: FieldValue = None
    reps: FieldValue = None


class WorkoutRead(BaseModel):
    """Workout as returned to clients, keyed the way the web client expects."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID = Field(alias="_id")
    title: str
    load: str
    reps: str
    user_id: uuid.UUID
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
