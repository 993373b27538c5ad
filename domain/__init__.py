"""
Domain layer for the Fit Journal API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    ExerciseSet,
    Metric,
    User,
    Workout,
)

__all__ = [
    "Exercise",
    "ExerciseSet",
    "Metric",
    "User",
    "Workout",
]
