"""
Account Schemas.

Request and response bodies for /auth and /users. Fields the account layer
requires are still optional here so a missing value is reported with the
same "field ... is required" message as a blank one.
"""

from typing import Optional

from pydantic import BaseModel, Field

from domain.models import User


class RegisterRequest(BaseModel):
    """Request body for POST /auth/register."""
    username: str = Field(default="", max_length=100)
    password: str = ""
    birth_date: Optional[str] = Field(default=None, description="Display birth date")
    height: Optional[str] = Field(default=None, description="Display height")


class LoginRequest(BaseModel):
    """Request body for POST /auth/login."""
    username: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    """Response body for a successful login."""
    token: str


class UserResponse(BaseModel):
    """Public view of an account. The password hash never appears here."""
    id: Optional[int] = None
    username: str
    birth_date: str = ""
    height: str = ""

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            birth_date=user.birth_date,
            height=user.height,
        )


class UserUpdateRequest(BaseModel):
    """Request body for PUT /users. Empty fields are left unchanged."""
    username: Optional[str] = None
    password: Optional[str] = None
    birth_date: Optional[str] = None
    height: Optional[str] = None
