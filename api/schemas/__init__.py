"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- accounts: Registration, login and profile bodies
- workouts: Exercise and set payloads

Workouts are returned as ``domain.models.Workout`` directly.
"""

from api.schemas.accounts import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
    UserUpdateRequest,
)
from api.schemas.workouts import ExercisePayload, SetPayload

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
    "UserUpdateRequest",
    "ExercisePayload",
    "SetPayload",
]
