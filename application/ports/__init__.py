"""
Repository and Service Interfaces (Ports) for the Fit Journal API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, hashing, token signing). Implementations are
provided in the infrastructure layer and in ``backend``.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ and backend/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, IdGenerator

    class WorkoutService:
        def __init__(self, workout_repo: WorkoutRepository, ids: IdGenerator):
            self.workout_repo = workout_repo
            self.ids = ids
"""

# Account persistence
from application.ports.user_repository import UserRepository

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

# Metric persistence (storage contract only)
from application.ports.metric_repository import MetricRepository

# Credentials
from application.ports.security import PasswordHasher, TokenService

# Nested entry identifiers
from application.ports.id_generator import IdGenerator, RandomIdGenerator

__all__ = [
    "UserRepository",
    "WorkoutRepository",
    "MetricRepository",
    "PasswordHasher",
    "TokenService",
    "IdGenerator",
    "RandomIdGenerator",
]
