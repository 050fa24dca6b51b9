"""Authentication and user schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=72)
    country: str | None = Field(None, max_length=100)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class PasswordChange(BaseModel):
    """Password overwrite request."""

    password: str = Field(..., min_length=1, max_length=72)


class ForgotPasswordRequest(BaseModel):
    """Request a password reset email."""

    email: EmailStr = Field(..., max_length=255)


class ResetPasswordRequest(BaseModel):
    """Redeem a password reset token."""

    token: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=72)


class UserResponse(BaseModel):
    """Public user information (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    country: str | None


class AuthResponse(BaseModel):
    """Registration/login response."""

    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
