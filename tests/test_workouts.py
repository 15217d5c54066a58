"""Workout service tests."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.orm import Session

from liftlog.models.workout import Workout
from liftlog.services.errors import NotFoundError, ValidationError
from liftlog.services.tokens import Identity
from liftlog.services.workouts import WorkoutService, parse_workout_id


@pytest.fixture
def service(db: Session) -> WorkoutService:
    return WorkoutService(db)


@pytest.fixture
def owner() -> Identity:
    return Identity(user_id=uuid.uuid4())


def test_parse_workout_id_rejects_malformed() -> None:
    with pytest.raises(NotFoundError, match="No such workout"):
        parse_workout_id("invalid_id")


class TestCreate:
    def test_owner_comes_from_identity(self, service: WorkoutService, owner: Identity) -> None:
        workout = service.create(owner, "Squat", "100", "5")
        assert workout.user_id == owner.user_id
        assert (workout.title, workout.load, workout.reps) == ("Squat", "100", "5")
        assert workout.created_at is not None
        assert workout.updated_at is not None

    def test_numeric_values_stored_as_text(self, service: WorkoutService, owner) -> None:
        workout = service.create(owner, "Bench", 62.5, 8)
        assert workout.load == "62.5"
        assert workout.reps == "8"

    @pytest.mark.parametrize(
        "title,load,reps,missing",
        [
            (None, "100", "5", ["title"]),
            ("Squat", None, "5", ["load"]),
            ("Squat", "100", "", ["reps"]),
            ("", 0, None, ["title", "load", "reps"]),
            ("Squat", None, None, ["load", "reps"]),
        ],
    )
    def test_names_exactly_the_empty_fields(
        self, service: WorkoutService, owner, title, load, reps, missing
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            service.create(owner, title, load, reps)
        assert exc_info.value.message == "Please fill in all the fields"
        assert exc_info.value.empty_fields == missing


class TestListOwned:
    def test_newest_first_and_scoped_to_owner(
        self, db: Session, service: WorkoutService, owner: Identity
    ) -> None:
        other = Identity(user_id=uuid.uuid4())
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for i, title in enumerate(["Workout 1", "Workout 2", "Workout 3"]):
            db.add(
                Workout(
                    title=title,
                    load="100",
                    reps="10",
                    user_id=owner.user_id,
                    created_at=base + timedelta(minutes=i),
                )
            )
        db.add(Workout(title="Not mine", load="1", reps="1", user_id=other.user_id))
        db.commit()

        titles = [w.title for w in service.list_owned(owner)]
        assert titles == ["Workout 3", "Workout 2", "Workout 1"]
        assert [w.title for w in service.list_owned(other)] == ["Not mine"]

    def test_empty(self, service: WorkoutService, owner: Identity) -> None:
        assert service.list_owned(owner) == []


class TestGet:
    def test_found_regardless_of_caller(self, service: WorkoutService, owner) -> None:
        created = service.create(owner, "Squat", "100", "5")
        assert service.get(str(created.id)).id == created.id

    def test_missing_record(self, service: WorkoutService) -> None:
        with pytest.raises(NotFoundError, match="No such workout"):
            service.get(str(uuid.uuid4()))

    def test_malformed_id(self, service: WorkoutService) -> None:
        with pytest.raises(NotFoundError):
            service.get("invalid_id")


class TestDelete:
    def test_returns_deleted_record(self, db: Session, service: WorkoutService, owner) -> None:
        created = service.create(owner, "Squat", "100", "5")
        workout_id = created.id

        deleted = service.delete(str(workout_id))

        assert deleted.id == workout_id
        assert deleted.title == "Squat"
        assert db.get(Workout, workout_id) is None

    def test_missing_record_is_validation_error(self, service: WorkoutService) -> None:
        with pytest.raises(ValidationError, match="No such workout"):
            service.delete(str(uuid.uuid4()))

    def test_malformed_id_is_not_found(self, service: WorkoutService) -> None:
        with pytest.raises(NotFoundError):
            service.delete("invalid_id")


class TestUpdate:
    def test_returns_previous_state_and_applies_patch(
        self, db: Session, service: WorkoutService, owner
    ) -> None:
        created = service.create(owner, "Squat", "100", "5")

        previous = service.update(str(created.id), {"title": "Front squat", "reps": 8})

        assert (previous.title, previous.load, previous.reps) == ("Squat", "100", "5")
        stored = db.get(Workout, created.id)
        db.refresh(stored)
        assert (stored.title, stored.load, stored.reps) == ("Front squat", "100", "8")

    def test_owner_cannot_be_overridden(self, db: Session, service: WorkoutService, owner) -> None:
        created = service.create(owner, "Squat", "100", "5")
        service.update(str(created.id), {"user_id": str(uuid.uuid4()), "title": "Deadlift"})
        stored = db.get(Workout, created.id)
        db.refresh(stored)
        assert stored.user_id == owner.user_id

    def test_empty_values_are_allowed(self, db: Session, service: WorkoutService, owner) -> None:
        created = service.create(owner, "Squat", "100", "5")
        service.update(str(created.id), {"title": ""})
        stored = db.get(Workout, created.id)
        db.refresh(stored)
        assert stored.title == ""

    def test_missing_record_is_validation_error(self, service: WorkoutService) -> None:
        with pytest.raises(ValidationError, match="No such workout"):
            service.update(str(uuid.uuid4()), {"title": "x"})

    def test_malformed_id_is_not_found(self, service: WorkoutService) -> None:
        with pytest.raises(NotFoundError):
            service.update("invalid_id", {"title": "x"})
