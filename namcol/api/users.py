"""User administration endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from namcol.api.dependencies import get_auth_service
from namcol.schemas.auth import MessageResponse, PasswordChange, UserResponse
from namcol.services.auth import AuthService

router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserResponse])
async def list_users(auth_service: Annotated[AuthService, Depends(get_auth_service)]):
    """List all users."""
    return auth_service.list_users()


@router.put("/user/{user_id}/password", response_model=MessageResponse)
async def change_password(
    user_id: int,
    password_change: PasswordChange,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Overwrite a user's password."""
    auth_service.change_password(user_id, password_change.password)
    return {"message": "Password updated successfully"}


@router.delete("/user/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Hard delete a user and their progress."""
    auth_service.delete_user(user_id)
    return {"message": "User deleted successfully"}
