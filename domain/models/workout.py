"""
Workout aggregate root.

A Workout exclusively owns its exercises, and each exercise owns its sets.
The whole tree is persisted as one unit, so every change rewrites the
complete ``exercises`` collection.
"""

import time
from typing import List, Optional, Set

from pydantic import BaseModel, Field

from domain.models.exercise import Exercise


class Workout(BaseModel):
    """
    Aggregate root representing one training session.

    Examples:
        >>> workout = Workout(user_id=1, start_time=1700000000)
        >>> workout.exercises
        []
    """

    id: Optional[int] = Field(
        default=None,
        description="Storage-assigned identifier. None for unsaved workouts.",
    )
    user_id: int = Field(..., description="Owner of the workout")
    start_time: int = Field(
        default_factory=lambda: int(time.time()),
        description="Start of the session, epoch seconds",
    )
    exercises: List[Exercise] = Field(
        default_factory=list, description="Exercises in the order they were added"
    )
    version: int = Field(
        default=1,
        ge=1,
        description="Optimistic concurrency counter, bumped on every stored change",
    )

    def find_exercise(self, exercise_id: int) -> Optional[Exercise]:
        """Return the exercise with ``exercise_id``, or None."""
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def nested_ids(self) -> Set[int]:
        """All exercise and set identifiers currently in use in this workout."""
        ids = set()
        for exercise in self.exercises:
            ids.add(exercise.id)
            ids.update(s.id for s in exercise.sets)
        return ids
