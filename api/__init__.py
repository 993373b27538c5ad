"""
API package for the Fit Journal API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Error envelope and exception handlers
- schemas/: Request and response bodies
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_user_repo,
    get_workout_repo,
    get_metric_repo,
    get_password_hasher,
    get_token_service,
    get_user_account_use_case,
    get_workout_log_use_case,
    get_current_identity,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_user_repo",
    "get_workout_repo",
    "get_metric_repo",
    # Credentials
    "get_password_hasher",
    "get_token_service",
    # Use cases
    "get_user_account_use_case",
    "get_workout_log_use_case",
    # Authentication
    "get_current_identity",
    "get_current_user",
]
