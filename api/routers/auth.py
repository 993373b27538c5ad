"""
Auth router for registration and login.

This router contains endpoints for:
- /auth/register - Create an account
- /auth/login - Exchange credentials for a bearer token
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_user_account_use_case
from api.schemas import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from application.use_cases import UserAccountUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


@router.post("/register", status_code=201, response_model=UserResponse)
def register(
    body: RegisterRequest,
    accounts: UserAccountUseCase = Depends(get_user_account_use_case),
):
    """
    Register a new account.

    Returns the stored account without its password hash.
    """
    user = accounts.register(
        username=body.username,
        password=body.password,
        birth_date=body.birth_date,
        height=body.height,
    )
    return UserResponse.from_user(user)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    accounts: UserAccountUseCase = Depends(get_user_account_use_case),
):
    """Check credentials and return a short-lived bearer token."""
    token = accounts.authenticate(body.username, body.password)
    return TokenResponse(token=token)
