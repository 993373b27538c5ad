"""
Application Use Cases for the Fit Journal API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models and raise ``application.errors`` failures,
  never HTTP responses

Usage:
    from application.use_cases import UserAccountUseCase, WorkoutLogUseCase

    accounts = UserAccountUseCase(
        user_repo=user_repo,
        password_hasher=hasher,
        token_service=tokens,
    )
    token = accounts.authenticate("alice", "s3cret")

    workouts = WorkoutLogUseCase(workout_repo=workout_repo)
    workout = workouts.create(user_id=1)
"""

from application.use_cases.user_account import UserAccountUseCase, UserChanges
from application.use_cases.workout_log import WorkoutLogUseCase

__all__ = [
    # UserAccount
    "UserAccountUseCase",
    "UserChanges",
    # WorkoutLog
    "WorkoutLogUseCase",
]
