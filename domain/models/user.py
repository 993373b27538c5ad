"""
User account domain model.
"""

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A registered account.

    ``username`` is the business key used in tokens and lookups.
    ``password_hash`` is excluded from every serialization so it can
    never reach a response body; repositories write it explicitly.
    """

    id: Optional[int] = Field(
        default=None,
        description="Storage-assigned identifier. None before registration.",
    )
    username: str = Field(..., min_length=1, description="Unique login name")
    password_hash: str = Field(default="", exclude=True, repr=False)
    birth_date: str = Field(default="", description="Display birth date")
    height: str = Field(default="", description="Display height")
    is_deleted: bool = Field(default=False, exclude=True)
