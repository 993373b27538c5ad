"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from typing import List, Optional, Protocol

from domain.models import Workout


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    A workout is stored as one row with its exercises and sets serialized
    into a single document column. Writes replace the whole document.

    Updates are guarded by ``Workout.version``: the row is only written when
    the stored version still equals the version the caller read, and the
    stored version is then incremented.
    """

    def create(self, workout: Workout) -> Workout:
        """
        Insert a new workout.

        Args:
            workout: Workout without an ID

        Returns:
            Stored workout with its generated ID
        """
        ...

    def get(self, workout_id: int) -> Optional[Workout]:
        """
        Get a single workout by ID.

        Args:
            workout_id: Workout ID

        Returns:
            Workout or None if not found
        """
        ...

    def list_for_user(self, user_id: int) -> List[Workout]:
        """
        Get all workouts owned by a user, in storage order.

        Args:
            user_id: Owner ID

        Returns:
            List of workouts (may be empty)
        """
        ...

    def update(self, workout: Workout) -> Optional[Workout]:
        """
        Replace user, start time and exercises of an existing workout.

        Args:
            workout: Workout carrying the version it was read at

        Returns:
            The stored workout with its new version, or None when no row
            with that ID and version exists (deleted or changed meanwhile).
        """
        ...

    def delete(self, workout_id: int) -> bool:
        """
        Hard-delete a workout.

        Args:
            workout_id: Workout ID

        Returns:
            True if a row was deleted, False if not found
        """
        ...
