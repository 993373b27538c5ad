"""
Workouts router for the workout log.

This router contains endpoints for:
- /workouts - Start a workout, list the caller's workouts
- /workouts/{workout_id} - Get, add an exercise to, delete a workout
- /workouts/{workout_id}/exercises/{exercise_id} - Add a set, remove an exercise
- /workouts/{workout_id}/exercises/{exercise_id}/sets/{set_id} - Remove a set

All endpoints require a bearer token and only see the caller's workouts.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response

from api.deps import get_current_user, get_workout_log_use_case
from api.schemas import ExercisePayload, SetPayload
from application.ports.id_generator import MAX_NESTED_ID
from application.use_cases import WorkoutLogUseCase
from domain.models import User, Workout

logger = logging.getLogger(__name__)

# Workout rows are BIGSERIAL and nested IDs are drawn from the same range.
WorkoutId = Annotated[int, Path(ge=1, le=MAX_NESTED_ID)]
ExerciseId = Annotated[int, Path(ge=1, le=MAX_NESTED_ID)]
SetId = Annotated[int, Path(ge=1, le=MAX_NESTED_ID)]

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Workouts
# =============================================================================


@router.post("", status_code=201, response_model=Workout)
def create_workout(
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """Start an empty workout at the current time."""
    return workouts.create(user.id)


@router.get("", response_model=List[Workout])
def list_workouts(
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """List the caller's workouts in storage order."""
    return workouts.list_for_user(user.id)


@router.get("/{workout_id}", response_model=Workout)
def get_workout(
    workout_id: WorkoutId,
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """Get one workout with all its exercises and sets."""
    return workouts.get(workout_id, user.id)


@router.put("/{workout_id}", response_model=Workout)
def add_exercise(
    workout_id: WorkoutId,
    body: ExercisePayload,
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """
    Append an exercise to the workout.

    The exercise, and any sets sent with it, get server-assigned IDs.
    Returns the updated workout.
    """
    return workouts.add_exercise(workout_id, user.id, body.to_domain())


@router.delete("/{workout_id}", status_code=204, response_class=Response)
def delete_workout(
    workout_id: WorkoutId,
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """Permanently delete a workout."""
    workouts.delete(workout_id, user.id)
    return Response(status_code=204)


# =============================================================================
# Exercises and Sets
# =============================================================================


@router.post("/{workout_id}/exercises/{exercise_id}", response_model=Workout)
def add_set(
    workout_id: WorkoutId,
    exercise_id: ExerciseId,
    body: SetPayload,
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """Append a set to an exercise. Returns the updated workout."""
    return workouts.add_set(workout_id, user.id, exercise_id, body.to_domain())


@router.delete(
    "/{workout_id}/exercises/{exercise_id}",
    status_code=204,
    response_class=Response,
)
def remove_exercise(
    workout_id: WorkoutId,
    exercise_id: ExerciseId,
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """Remove an exercise together with its sets."""
    workouts.remove_exercise(workout_id, user.id, exercise_id)
    return Response(status_code=204)


@router.delete(
    "/{workout_id}/exercises/{exercise_id}/sets/{set_id}",
    status_code=204,
    response_class=Response,
)
def remove_set(
    workout_id: WorkoutId,
    exercise_id: ExerciseId,
    set_id: SetId,
    user: User = Depends(get_current_user),
    workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
):
    """Remove one set from an exercise."""
    workouts.remove_set(workout_id, user.id, exercise_id, set_id)
    return Response(status_code=204)
