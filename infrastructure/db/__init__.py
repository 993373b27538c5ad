"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

The expected tables are defined in ``schema.sql`` next to this module.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseUserRepository,
        SupabaseWorkoutRepository,
        SupabaseMetricRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    user_repo = SupabaseUserRepository(client)
    workout_repo = SupabaseWorkoutRepository(client)
    metric_repo = SupabaseMetricRepository(client)
"""

from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.workout_repository import SupabaseWorkoutRepository
from infrastructure.db.metric_repository import SupabaseMetricRepository

__all__ = [
    # Account persistence
    "SupabaseUserRepository",

    # Workout persistence
    "SupabaseWorkoutRepository",

    # Metric persistence
    "SupabaseMetricRepository",
]
