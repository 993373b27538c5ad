"""
User Repository Interface (Port).

This module defines the abstract interface for user account persistence.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from typing import List, Optional, Protocol

from domain.models import User


class UserRepository(Protocol):
    """
    Abstract interface for user account storage.

    Lookups only ever see active accounts: a soft-deleted row stays in
    storage but behaves as absent for every method except ``create``,
    which may reuse its username.
    """

    def create(self, user: User) -> User:
        """
        Insert a new account.

        Args:
            user: Account to store. ``password_hash`` must already be set.

        Returns:
            The stored account with its generated ``id``.

        Raises:
            ConflictError: Another active account holds the username.
            StorageError: The backend failed.
        """
        ...

    def find_active(self, username: str) -> Optional[User]:
        """
        Get the active account with ``username``.

        Returns:
            The account, or None when absent or soft-deleted.
        """
        ...

    def find_all(self) -> List[User]:
        """
        Get all active accounts in storage order.

        Returns:
            List of accounts (may be empty)
        """
        ...

    def update(self, user: User) -> bool:
        """
        Overwrite username, password hash, birth date and height of the
        active account identified by ``user.id``.

        Returns:
            True if an active row was updated, False if none matched.

        Raises:
            ConflictError: The new username is held by another active account.
        """
        ...

    def soft_delete(self, username: str) -> bool:
        """
        Flag the active account with ``username`` as deleted.

        Returns:
            True if an account was flagged, False if none was active.
        """
        ...
