"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Fakes keep the storage rules that matter to callers (unique active
  usernames, version-checked workout updates)
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()

    # Factory function with pre-populated data
    repo = create_workout_repo(user_id=1, num_workouts=3)
"""
from domain.models import Exercise, ExerciseSet, Workout

# Import all fake implementations
from tests.fakes.id_generator import SequenceIdGenerator
from tests.fakes.metric_repository import FakeMetricRepository
from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.workout_repository import FakeWorkoutRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_repo(
    *,
    user_id: int = 1,
    num_workouts: int = 0,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Each generated workout holds one "Squat" exercise with one set.

    Args:
        user_id: Owner of the generated workouts
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    repo.seed([
        Workout(
            user_id=user_id,
            start_time=1700000000 + i * 3600,
            exercises=[
                Exercise(
                    id=100 + i,
                    name="Squat",
                    sets=[ExerciseSet(id=200 + i, reps=5, weight=100.0)],
                )
            ],
        )
        for i in range(num_workouts)
    ])
    return repo


__all__ = [
    "FakeMetricRepository",
    "FakeUserRepository",
    "FakeWorkoutRepository",
    "SequenceIdGenerator",
    "create_workout_repo",
]
