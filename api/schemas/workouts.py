"""
Workout Schemas.

Payloads for adding exercises and sets. IDs are always assigned by the
server, so the payloads have no ``id`` field; a client-sent one is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import Exercise, ExerciseSet


class SetPayload(BaseModel):
    """Request body for POST /workouts/{wid}/exercises/{eid}."""
    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0)

    def to_domain(self) -> ExerciseSet:
        return ExerciseSet(reps=self.reps, weight=self.weight)


class ExercisePayload(BaseModel):
    """Request body for PUT /workouts/{id}."""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    sets: List[SetPayload] = Field(default_factory=list)

    def to_domain(self) -> Exercise:
        return Exercise(
            name=self.name,
            description=self.description,
            sets=[s.to_domain() for s in self.sets],
        )
