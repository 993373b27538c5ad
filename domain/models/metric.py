"""
Daily body metric record.

Only the storage contract exists for metrics; no endpoint exposes them yet.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Metric(BaseModel):
    """Weight and calorie intake of one user on one day."""

    id: Optional[str] = Field(default=None, description="Opaque storage key")
    user_id: int
    weight: Optional[str] = None
    calories_consumed: Optional[str] = None
    day: str = Field(..., min_length=1, description="Calendar day, e.g. 2024-05-01")
