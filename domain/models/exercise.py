"""
Exercise and set value objects nested inside a workout.

Exercises are not stored on their own: they live in the workout's
``exercises`` document and are addressed through their parent workout.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ExerciseSet(BaseModel):
    """
    A single performed set.

    Examples:
        >>> ExerciseSet(reps=5, weight=100.0)
        ExerciseSet(id=0, reps=5, weight=100.0)
    """

    id: int = Field(
        default=0,
        description="Identifier unique within the parent exercise. 0 until assigned.",
    )
    reps: int = Field(default=0, ge=0, description="Repetitions performed")
    weight: float = Field(default=0.0, ge=0, description="Load used for the set")


class Exercise(BaseModel):
    """
    An exercise performed during a workout, owning an ordered list of sets.

    Examples:
        >>> squat = Exercise(name="Squat")
        >>> squat.sets
        []
        >>> squat.find_set(42) is None
        True
    """

    id: int = Field(
        default=0,
        description="Identifier unique within the parent workout. 0 until assigned.",
    )
    name: str = Field(..., min_length=1, max_length=200, description="Exercise name")
    description: Optional[str] = Field(
        default=None, max_length=2000, description="Free-form notes"
    )
    sets: List[ExerciseSet] = Field(
        default_factory=list, description="Sets in the order they were logged"
    )

    def find_set(self, set_id: int) -> Optional[ExerciseSet]:
        """Return the set with ``set_id``, or None."""
        for exercise_set in self.sets:
            if exercise_set.id == set_id:
                return exercise_set
        return None
