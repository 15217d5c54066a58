"""Workout API routes. Every route requires a bearer token."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_workout_service, require_identity
from liftlog.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from liftlog.services.tokens import Identity
from liftlog.services.workouts import WorkoutService

router = APIRouter(dependencies=[Depends(require_identity)])


@router.get("", response_model=list[WorkoutRead])
def list_workouts(
    identity: Identity = Depends(require_identity),
    workouts: WorkoutService = Depends(get_workout_service),
) -> list[WorkoutRead]:
    """List the caller's workouts, newest first."""
    return [WorkoutRead.model_validate(w) for w in workouts.list_owned(identity)]


@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(
    workout_id: str,
    workouts: WorkoutService = Depends(get_workout_service),
) -> WorkoutRead:
    return WorkoutRead.model_validate(workouts.get(workout_id))


@router.post("", response_model=WorkoutRead)
def create_workout(
    data: WorkoutCreate | None = None,
    identity: Identity = Depends(require_identity),
    workouts: WorkoutService = Depends(get_workout_service),
) -> WorkoutRead:
    """Create a workout owned by the caller."""
    data = data or WorkoutCreate()
    workout = workouts.create(identity, data.title, data.load, data.reps)
    return WorkoutRead.model_validate(workout)


@router.delete("/{workout_id}", response_model=WorkoutRead)
def delete_workout(
    workout_id: str,
    workouts: WorkoutService = Depends(get_workout_service),
) -> WorkoutRead:
    """Delete a workout and return it."""
    return workouts.delete(workout_id)


@router.patch("/{workout_id}", response_model=WorkoutRead)
@router.put("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: str,
    data: WorkoutUpdate | None = None,
    workouts: WorkoutService = Depends(get_workout_service),
) -> WorkoutRead:
    """Apply a partial update. Responds with the workout as it was before."""
    fields = data.model_dump(exclude_unset=True) if data is not None else {}
    return workouts.update(workout_id, fields)
