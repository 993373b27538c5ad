"""
Domain models for the Fit Journal API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- User: A registered account, soft-deleted rather than removed
- Workout: The aggregate root owning exercises and their sets
- Exercise / ExerciseSet: Nested entries of a workout
- Metric: Per-day body metrics (storage contract only)

Usage:
    >>> from domain.models import Workout, Exercise, ExerciseSet

    >>> workout = Workout(
    ...     user_id=1,
    ...     exercises=[Exercise(id=7, name="Squat", sets=[ExerciseSet(id=8, reps=5, weight=100.0)])],
    ... )

    >>> # Serialize to JSON
    >>> json_str = workout.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> workout = Workout.model_validate_json(json_str)
"""

from domain.models.exercise import Exercise, ExerciseSet
from domain.models.metric import Metric
from domain.models.user import User
from domain.models.workout import Workout

__all__ = [
    "Exercise",
    "ExerciseSet",
    "Metric",
    "User",
    "Workout",
]
