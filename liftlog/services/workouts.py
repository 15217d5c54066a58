"""Workout service: create, read, update and delete workout records."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from liftlog.models.workout import Workout
from liftlog.schemas.workout import FieldValue, WorkoutRead
from liftlog.services.errors import NotFoundError, ValidationError
from liftlog.services.tokens import Identity

logger = logging.getLogger(__name__)

NO_SUCH_WORKOUT = "No such workout"
REQUIRED_FIELDS = ("title", "load", "reps")
UPDATABLE_FIELDS = REQUIRED_FIELDS


def parse_workout_id(raw: str) -> uuid.UUID:
    """Parse a workout id from a path segment; malformed ids are NotFoundError."""
    try:
        return uuid.UUID(raw)
    except (ValueError, TypeError):
        raise NotFoundError(NO_SUCH_WORKOUT) from None


def _as_text(value: FieldValue) -> str:
    return value if isinstance(value, str) else str(value)


class WorkoutService:
    """CRUD for workouts.

    list_owned is scoped to the caller. get, update and delete address a workout by id
    alone and do not compare its owner with the caller.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_owned(self, identity: Identity) -> list[Workout]:
        """All workouts owned by identity, newest first."""
        return (
            self.db.query(Workout)
            .filter(Workout.user_id == identity.user_id)
            .order_by(Workout.created_at.desc())
            .all()
        )

    def get(self, workout_id: str) -> Workout:
        workout = self.db.get(Workout, parse_workout_id(workout_id))
        if workout is None:
            raise NotFoundError(NO_SUCH_WORKOUT)
        return workout

    def create(
        self,
        identity: Identity,
        title: FieldValue,
        load: FieldValue,
        reps: FieldValue,
    ) -> Workout:
        """Create a workout owned by identity.

        Raises ValidationError naming every empty field (in title, load, reps
        order) when any of them is missing or falsy.
        """
        values = {"title": title, "load": load, "reps": reps}
        empty_fields = [name for name in REQUIRED_FIELDS if not values[name]]
        if empty_fields:
            raise ValidationError("Please fill in all the fields", empty_fields=empty_fields)

        workout = Workout(
            title=_as_text(title),
            load=_as_text(load),
            reps=_as_text(reps),
            user_id=identity.user_id,
        )
        self.db.add(workout)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create workout for user %s", identity.user_id)
            raise ValidationError("Could not save workout") from None
        self.db.refresh(workout)
        return workout

    def delete(self, workout_id: str) -> WorkoutRead:
        """Delete a workout and return what was deleted."""
        workout = self._get_for_write(workout_id)
        deleted = WorkoutRead.model_validate(workout)
        self.db.delete(workout)
        self.db.commit()
        return deleted

    def update(self, workout_id: str, fields: dict[str, FieldValue]) -> WorkoutRead:
        """Merge the supplied fields into a workout.

        Returns the workout as it was before the update. Fields other than
        title/load/reps, and fields given as null, are ignored.
        """
        workout = self._get_for_write(workout_id)
        previous = WorkoutRead.model_validate(workout)
        for name in UPDATABLE_FIELDS:
            value = fields.get(name)
            if value is not None:
                setattr(workout, name, _as_text(value))
        self.db.commit()
        return previous

    def _get_for_write(self, workout_id: str) -> Workout:
        # Malformed ids are 404; well-formed ids with no record are 400
        workout = self.db.get(Workout, parse_workout_id(workout_id))
        if workout is None:
            raise ValidationError(NO_SUCH_WORKOUT)
        return workout
