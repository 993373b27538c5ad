"""
Users router for the caller's own account.

Every endpoint acts on the account named by the bearer token; there is no
way to address another user.
"""

import logging

from fastapi import APIRouter, Depends, Response

from api.deps import get_current_identity, get_user_account_use_case
from api.schemas import UserResponse, UserUpdateRequest
from application.use_cases import UserAccountUseCase, UserChanges
from backend.auth import Identity

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get("", response_model=UserResponse)
def get_user(
    identity: Identity = Depends(get_current_identity),
    accounts: UserAccountUseCase = Depends(get_user_account_use_case),
):
    """Return the caller's account."""
    return UserResponse.from_user(accounts.get_by_username(identity.username))


@router.put("", status_code=204, response_class=Response)
def update_user(
    body: UserUpdateRequest,
    identity: Identity = Depends(get_current_identity),
    accounts: UserAccountUseCase = Depends(get_user_account_use_case),
):
    """
    Merge profile changes into the caller's account.

    Only non-empty fields overwrite stored values. A new password is
    re-hashed. Renaming the account is rejected.
    """
    accounts.update(
        identity.username,
        UserChanges(
            username=body.username,
            password=body.password,
            birth_date=body.birth_date,
            height=body.height,
        ),
    )
    return Response(status_code=204)


@router.delete("", status_code=204, response_class=Response)
def delete_user(
    identity: Identity = Depends(get_current_identity),
    accounts: UserAccountUseCase = Depends(get_user_account_use_case),
):
    """Soft-delete the caller's account. Its username becomes free again."""
    accounts.delete(identity.username)
    return Response(status_code=204)
