"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from namcol.api.dependencies import get_auth_service
from namcol.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    MessageResponse,
    ResetPasswordRequest,
    UserLogin,
    UserRegister,
    UserResponse,
)
from namcol.services.auth import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user = auth_service.register(
        user_data.name, user_data.email, user_data.password, user_data.country
    )
    return AuthResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Verify email and password."""
    user = auth_service.login(credentials.email, credentials.password)
    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
    )


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Issue a reset token and email the reset link."""
    auth_service.request_password_reset(request.email)
    return {"message": "Password reset email sent"}


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Redeem a reset token and set a new password."""
    auth_service.reset_password(request.token, request.password)
    return {"message": "Password has been reset successfully"}
