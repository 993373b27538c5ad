"""
Infrastructure Layer for the Fit Journal API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseUserRepository,
    SupabaseWorkoutRepository,
    SupabaseMetricRepository,
)

__all__ = [
    "SupabaseUserRepository",
    "SupabaseWorkoutRepository",
    "SupabaseMetricRepository",
]
