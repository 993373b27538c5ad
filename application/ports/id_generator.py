"""
Identifier source for exercises and sets nested inside a workout.
"""
import secrets
from typing import Protocol

# Keep IDs inside the signed 64-bit range used by the JSON document column.
MAX_NESTED_ID = 2**63 - 1


class IdGenerator(Protocol):
    """Produces candidate identifiers for nested workout entries."""

    def next_id(self) -> int:
        """Return a positive candidate ID. Callers handle collisions."""
        ...


class RandomIdGenerator:
    """Draws uniformly random non-zero 63-bit integers from ``secrets``."""

    def next_id(self) -> int:
        return secrets.randbelow(MAX_NESTED_ID) + 1
