"""
FastAPI Dependency Providers for the Fit Journal API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, Supabase client, password hasher and token service are cached
  per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth providers resolve the bearer token into an Identity

Usage in routers:
    from api.deps import get_current_user, get_workout_log_use_case

    @router.get("/workouts")
    def list_workouts(
        user: User = Depends(get_current_user),
        workouts: WorkoutLogUseCase = Depends(get_workout_log_use_case),
    ):
        return workouts.list_for_user(user.id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository()
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from supabase import Client, ClientOptions, create_client

# Protocol types (interfaces)
from application.ports import (
    MetricRepository,
    PasswordHasher,
    TokenService,
    UserRepository,
    WorkoutRepository,
)
from application.errors import NotFoundError, UnauthorizedError
from application.use_cases import UserAccountUseCase, WorkoutLogUseCase
from domain.models import User

# Concrete implementations
from infrastructure import (
    SupabaseMetricRepository,
    SupabaseUserRepository,
    SupabaseWorkoutRepository,
)

from backend.auth import IDENTITY_STATE_KEY, Identity, authenticate_header
from backend.passwords import BcryptPasswordHasher
from backend.settings import Settings, get_settings as _get_settings
from backend.tokens import JWTTokenService

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings. Every
    PostgREST round trip is bounded by ``request_timeout_seconds``.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured")
        return None

    options = ClientOptions(postgrest_client_timeout=settings.request_timeout_seconds)
    return create_client(settings.supabase_url, settings.supabase_key, options=options)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """
    Get UserRepository implementation.

    Returns a SupabaseUserRepository instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseUserRepository(client)


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """Get WorkoutRepository implementation."""
    return SupabaseWorkoutRepository(client)


def get_metric_repo(
    client: Client = Depends(get_supabase_client_required),
) -> MetricRepository:
    """Get MetricRepository implementation."""
    return SupabaseMetricRepository(client)


# =============================================================================
# Credential Providers
# =============================================================================


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """bcrypt hasher at the configured cost factor."""
    return BcryptPasswordHasher(rounds=_get_settings().bcrypt_rounds)


@lru_cache
def get_token_service() -> TokenService:
    """
    Get the token service (cached).

    The signing secret and token lifetime come from settings; nothing
    else in the process reads the secret.
    """
    settings = _get_settings()
    return JWTTokenService(settings.jwt_secret, settings.token_ttl_seconds)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_user_account_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> UserAccountUseCase:
    """
    Get UserAccountUseCase with injected dependencies.

    Args:
        user_repo: Account persistence (injected)
        password_hasher: Password hashing (injected)
        token_service: Token issuing (injected)

    Returns:
        UserAccountUseCase: Use case for the account lifecycle
    """
    return UserAccountUseCase(
        user_repo=user_repo,
        password_hasher=password_hasher,
        token_service=token_service,
    )


def get_workout_log_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> WorkoutLogUseCase:
    """Get WorkoutLogUseCase with injected dependencies."""
    return WorkoutLogUseCase(workout_repo=workout_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),
) -> Identity:
    """
    Resolve the bearer token into the caller's identity.

    The identity is also stored on ``request.state`` so middleware and
    error handlers can see who made the call.

    Args:
        request: Current request
        authorization: Bearer token header
        token_service: Token validation (injected)

    Returns:
        Identity: The authenticated caller

    Raises:
        UnauthorizedError: Missing, malformed, invalid or expired token
    """
    identity = authenticate_header(authorization, token_service)
    setattr(request.state, IDENTITY_STATE_KEY, identity)
    return identity


def get_current_user(
    identity: Identity = Depends(get_current_identity),
    accounts: UserAccountUseCase = Depends(get_user_account_use_case),
) -> User:
    """
    Load the active account behind the token.

    A valid token for an account that was deleted since it was issued is
    treated as an authentication failure.

    Raises:
        UnauthorizedError: Token invalid, or its account no longer exists
    """
    try:
        return accounts.get_by_username(identity.username)
    except NotFoundError as e:
        raise UnauthorizedError(
            "User no longer exists",
            developer_message=f"token subject {identity.username!r} has no active account",
        ) from e


# =============================================================================
# Exports
# =============================================================================

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
