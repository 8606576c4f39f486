"""Auth endpoints."""

from fastapi import APIRouter, Depends

from job_vault.api.deps import get_current_user
from job_vault.api.schemas import UserResponse
from job_vault.auth import AuthUser

router = APIRouter()


@router.get("/user", response_model=UserResponse)
def current_user(user: AuthUser = Depends(get_current_user)):
    """Return the user identified by the bearer token."""
    return UserResponse(id=user.id, email=user.email)
