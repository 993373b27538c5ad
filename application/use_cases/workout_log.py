"""
WorkoutLog Use Case.

Creates workouts and edits the exercises and sets nested inside them.

Every mutation is a read-modify-write of the whole workout document:
load, change the in-memory tree, write it back guarded by the version that
was read. A concurrent writer in between turns the write into a conflict
instead of silently losing one of the two changes.
"""

import logging
import time
from typing import Callable, List, Optional

from application.errors import ConflictError, InternalError, NotFoundError
from application.ports import IdGenerator, RandomIdGenerator, WorkoutRepository
from domain.models import Exercise, ExerciseSet, Workout

logger = logging.getLogger(__name__)

# Redraws allowed before giving up on a generator that keeps colliding.
MAX_ID_ATTEMPTS = 32


class WorkoutLogUseCase:
    """
    Use case for the workout aggregate.

    Workouts are scoped to their owner: a workout that exists but belongs
    to someone else is reported as not found.

    Nested IDs are unique within their workout. Candidates come from the
    injected ``IdGenerator`` and are redrawn while they collide with an
    exercise or set ID already present.

    Usage:
        >>> use_case = WorkoutLogUseCase(workout_repo=workout_repo)
        >>> workout = use_case.create(user_id=1)
        >>> workout = use_case.add_exercise(workout.id, 1, Exercise(name="Squat"))
        >>> squat_id = workout.exercises[0].id
        >>> workout = use_case.add_set(workout.id, 1, squat_id, ExerciseSet(reps=5, weight=100.0))
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        id_generator: Optional[IdGenerator] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for workout persistence
            id_generator: Source of nested IDs (random by default)
            clock: Returns the current time in epoch seconds
        """
        self._workout_repo = workout_repo
        self._ids = id_generator or RandomIdGenerator()
        self._clock = clock

    # -------------------------------------------------------------------------
    # Workouts
    # -------------------------------------------------------------------------

    def create(self, user_id: int, now: Optional[int] = None) -> Workout:
        """Start an empty workout for ``user_id`` at ``now`` (default: current time)."""
        start_time = int(self._clock()) if now is None else now
        workout = self._workout_repo.create(
            Workout(user_id=user_id, start_time=start_time, exercises=[])
        )
        logger.info("Created workout %s for user %s", workout.id, user_id)
        return workout

    def get(self, workout_id: int, user_id: int) -> Workout:
        """
        Get a workout owned by ``user_id``.

        Raises:
            NotFoundError: Absent or owned by another user.
        """
        workout = self._workout_repo.get(workout_id)
        if workout is None or workout.user_id != user_id:
            raise NotFoundError(
                "Workout not found",
                developer_message=f"no workout {workout_id} for user {user_id}",
            )
        return workout

    def list_for_user(self, user_id: int) -> List[Workout]:
        """All workouts of ``user_id`` in storage order."""
        return self._workout_repo.list_for_user(user_id)

    def delete(self, workout_id: int, user_id: int) -> None:
        """
        Hard-delete a workout.

        Raises:
            NotFoundError: Absent, owned by another user, or deleted meanwhile.
        """
        self.get(workout_id, user_id)
        if not self._workout_repo.delete(workout_id):
            raise NotFoundError("Workout not found")
        logger.info("Deleted workout %s", workout_id)

    # -------------------------------------------------------------------------
    # Exercises
    # -------------------------------------------------------------------------

    def add_exercise(self, workout_id: int, user_id: int, exercise: Exercise) -> Workout:
        """
        Append ``exercise`` to the workout.

        The exercise and any sets it already carries get fresh IDs; IDs sent
        by the caller are ignored.
        """
        workout = self.get(workout_id, user_id)

        new_exercise = exercise.model_copy(deep=True)
        new_exercise.id = self._new_id(workout)
        new_exercise.sets = []
        workout.exercises.append(new_exercise)
        for exercise_set in exercise.sets:
            new_exercise.sets.append(
                exercise_set.model_copy(update={"id": self._new_id(workout)})
            )

        saved = self._save(workout)
        logger.info("Added exercise %s to workout %s", new_exercise.id, workout_id)
        return saved

    def remove_exercise(self, workout_id: int, user_id: int, exercise_id: int) -> None:
        """
        Remove an exercise with all its sets.

        Raises:
            NotFoundError: The workout has no exercise with ``exercise_id``.
        """
        workout = self.get(workout_id, user_id)

        remaining = [e for e in workout.exercises if e.id != exercise_id]
        if len(remaining) == len(workout.exercises):
            raise NotFoundError(
                "Exercise not found",
                developer_message=f"workout {workout_id} has no exercise {exercise_id}",
            )

        workout.exercises = remaining
        self._save(workout)
        logger.info("Removed exercise %s from workout %s", exercise_id, workout_id)

    # -------------------------------------------------------------------------
    # Sets
    # -------------------------------------------------------------------------

    def add_set(
        self,
        workout_id: int,
        user_id: int,
        exercise_id: int,
        exercise_set: ExerciseSet,
    ) -> Workout:
        """
        Append a set to one exercise of the workout.

        Raises:
            NotFoundError: The workout has no exercise with ``exercise_id``.
        """
        workout = self.get(workout_id, user_id)
        exercise = self._find_exercise(workout, exercise_id)

        new_set = exercise_set.model_copy(update={"id": self._new_id(workout)})
        exercise.sets.append(new_set)

        saved = self._save(workout)
        logger.info(
            "Added set %s to exercise %s of workout %s", new_set.id, exercise_id, workout_id
        )
        return saved

    def remove_set(
        self,
        workout_id: int,
        user_id: int,
        exercise_id: int,
        set_id: int,
    ) -> None:
        """
        Remove one set from an exercise.

        Raises:
            NotFoundError: Unknown exercise, or the exercise has no such set.
        """
        workout = self.get(workout_id, user_id)
        exercise = self._find_exercise(workout, exercise_id)

        exercise_set = exercise.find_set(set_id)
        if exercise_set is None:
            raise NotFoundError(
                "Set not found",
                developer_message=f"exercise {exercise_id} has no set {set_id}",
            )

        exercise.sets.remove(exercise_set)
        self._save(workout)
        logger.info("Removed set %s from exercise %s", set_id, exercise_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _find_exercise(self, workout: Workout, exercise_id: int) -> Exercise:
        exercise = workout.find_exercise(exercise_id)
        if exercise is None:
            raise NotFoundError(
                "Exercise not found",
                developer_message=f"workout {workout.id} has no exercise {exercise_id}",
            )
        return exercise

    def _new_id(self, workout: Workout) -> int:
        taken = workout.nested_ids()
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._ids.next_id()
            if candidate > 0 and candidate not in taken:
                return candidate
            logger.warning("Nested ID %s collides in workout %s, redrawing", candidate, workout.id)
        raise InternalError(
            developer_message=f"no free nested ID after {MAX_ID_ATTEMPTS} attempts",
        )

    def _save(self, workout: Workout) -> Workout:
        saved = self._workout_repo.update(workout)
        if saved is None:
            logger.warning(
                "Stale write on workout %s at version %s", workout.id, workout.version
            )
            raise ConflictError(
                "Workout was modified concurrently, retry",
                developer_message=f"version {workout.version} of workout {workout.id} is no longer current",
            )
        return saved
