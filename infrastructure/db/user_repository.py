"""
Supabase implementation of UserRepository.

Accounts live in the ``users`` table. Deleting an account only sets
``is_deleted``; every read filters on ``is_deleted = false``. The table
carries a partial unique index on ``username`` for active rows, so a
registration race surfaces here as a ConflictError.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.errors import StorageError
from domain.models import User
from infrastructure.db.errors import storage_failure

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
USER_COLUMNS = "id, username, password_hash, birth_date, height, is_deleted"
USERNAME_TAKEN = "User with this username already exists"


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(
        id=row["id"],
        username=row["username"],
        password_hash=row.get("password_hash") or "",
        birth_date=row.get("birth_date") or "",
        height=row.get("height") or "",
        is_deleted=bool(row.get("is_deleted", False)),
    )


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def create(self, user: User) -> User:
        """Insert a new account row and return it with its ID."""
        data = {
            "username": user.username,
            "password_hash": user.password_hash,
            "birth_date": user.birth_date,
            "height": user.height,
            "is_deleted": False,
        }
        try:
            result = self._client.table(USERS_TABLE).insert(data).execute()
        except Exception as e:
            raise storage_failure(
                "create user", e, conflict_message=USERNAME_TAKEN
            ) from e

        if not result.data:
            raise StorageError(developer_message="insert into users returned no row")
        return _row_to_user(result.data[0])

    def find_active(self, username: str) -> Optional[User]:
        """Get the active account with ``username``."""
        try:
            result = (
                self._client.table(USERS_TABLE)
                .select(USER_COLUMNS)
                .eq("username", username)
                .eq("is_deleted", False)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise storage_failure("find user", e) from e

        if not result.data:
            return None
        return _row_to_user(result.data[0])

    def find_all(self) -> List[User]:
        """Get all active accounts ordered by ID."""
        try:
            result = (
                self._client.table(USERS_TABLE)
                .select(USER_COLUMNS)
                .eq("is_deleted", False)
                .order("id")
                .execute()
            )
        except Exception as e:
            raise storage_failure("list users", e) from e

        return [_row_to_user(row) for row in result.data or []]

    def update(self, user: User) -> bool:
        """Overwrite profile fields of the active account ``user.id``."""
        data = {
            "username": user.username,
            "password_hash": user.password_hash,
            "birth_date": user.birth_date,
            "height": user.height,
        }
        try:
            result = (
                self._client.table(USERS_TABLE)
                .update(data)
                .eq("id", user.id)
                .eq("is_deleted", False)
                .execute()
            )
        except Exception as e:
            raise storage_failure("update user", e) from e

        return bool(result.data)

    def soft_delete(self, username: str) -> bool:
        """Flag the active account ``username`` as deleted."""
        try:
            result = (
                self._client.table(USERS_TABLE)
                .update({"is_deleted": True})
                .eq("username", username)
                .eq("is_deleted", False)
                .execute()
            )
        except Exception as e:
            raise storage_failure("delete user", e) from e

        deleted = len(result.data) if result.data else 0
        if deleted == 0:
            logger.warning("No active user %r to delete (0 rows updated)", username)
        return deleted > 0
