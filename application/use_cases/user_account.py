"""
UserAccount Use Case.

Registration, login and profile maintenance for journal accounts.
Accounts are soft-deleted: the row stays in storage but every lookup
treats it as absent, so the username becomes available again.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from application.errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    UnauthorizedError,
)
from application.ports import PasswordHasher, TokenService, UserRepository
from domain.models import User

logger = logging.getLogger(__name__)


@dataclass
class UserChanges:
    """Partial profile update. Empty or None fields are left untouched."""

    username: Optional[str] = None
    password: Optional[str] = None
    birth_date: Optional[str] = None
    height: Optional[str] = None


def _require_fields(fields: Dict[str, Optional[str]]) -> None:
    for name, value in fields.items():
        if value is None or not value.strip():
            raise BadRequestError(f"field {name} is required")


class UserAccountUseCase:
    """
    Use case for the account lifecycle.

    Usage:
        >>> use_case = UserAccountUseCase(
        ...     user_repo=user_repo,
        ...     password_hasher=hasher,
        ...     token_service=tokens,
        ... )
        >>> user = use_case.register("alice", "s3cret", birth_date="1990-01-01")
        >>> token = use_case.authenticate("alice", "s3cret")
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            user_repo: Repository for account persistence
            password_hasher: One-way password hashing
            token_service: Issues identity tokens on login
        """
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._token_service = token_service

    def register(
        self,
        username: str,
        password: str,
        birth_date: Optional[str] = None,
        height: Optional[str] = None,
    ) -> User:
        """
        Create a new account.

        The uniqueness check here only covers the common case; a concurrent
        registration that slips past it is rejected by the repository.

        Raises:
            BadRequestError: Username or password is blank.
            ConflictError: An active account already uses the username.
        """
        _require_fields({"username": username, "password": password})

        if self._user_repo.find_active(username) is not None:
            logger.warning("Registration rejected: username %r already taken", username)
            raise ConflictError("User with this username already exists")

        user = User(
            username=username,
            password_hash=self._password_hasher.hash(password),
            birth_date=birth_date or "",
            height=height or "",
        )
        created = self._user_repo.create(user)
        logger.info("Registered user %r (id=%s)", created.username, created.id)
        return created

    def authenticate(self, username: str, password: str) -> str:
        """
        Check credentials and issue a token for the account.

        Raises:
            BadRequestError: Username or password is blank.
            NotFoundError: No active account has the username.
            UnauthorizedError: The password does not match.
        """
        _require_fields({"username": username, "password": password})

        user = self._user_repo.find_active(username)
        if user is None:
            raise NotFoundError("User not found")

        if not self._password_hasher.verify(password, user.password_hash):
            logger.warning("Failed login for user %r", username)
            raise UnauthorizedError("Invalid login or password")

        return self._token_service.issue(user.username)

    def get_by_username(self, username: str) -> User:
        """
        Get the active account with ``username``.

        Raises:
            NotFoundError: Absent or soft-deleted.
        """
        user = self._user_repo.find_active(username)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update(self, username: str, changes: UserChanges) -> User:
        """
        Merge the non-empty fields of ``changes`` into the account.

        Raises:
            NotFoundError: The account does not exist anymore.
            BadRequestError: ``changes`` tries to rename the account.
        """
        user = self.get_by_username(username)

        if changes.username and changes.username != user.username:
            raise BadRequestError(
                "Username cannot be changed",
                developer_message="username is the immutable account key",
            )

        updates = {}
        if changes.birth_date:
            updates["birth_date"] = changes.birth_date
        if changes.height:
            updates["height"] = changes.height
        if changes.password:
            _require_fields({"password": changes.password})
            updates["password_hash"] = self._password_hasher.hash(changes.password)

        if not updates:
            return user

        updated = user.model_copy(update=updates)
        if not self._user_repo.update(updated):
            raise NotFoundError("User not found")

        logger.info("Updated user %r fields: %s", username, sorted(updates))
        return updated

    def delete(self, username: str) -> None:
        """
        Soft-delete the account.

        Raises:
            NotFoundError: No active account has the username.
        """
        if not self._user_repo.soft_delete(username):
            raise NotFoundError("User not found")
        logger.info("Soft-deleted user %r", username)
