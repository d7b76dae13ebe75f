"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.security import Role
from app.schemas.user import UserResponse
from app.utils.validators import validate_phone


class RegisterRequest(BaseModel):
    """Register request schema."""

    fullname: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone_number: str = Field(..., max_length=20, description="At least 10 digits, e.g. +91-9876543210")
    password: str = Field(..., min_length=8, description="Password must be at least 8 characters")
    role: Role

    @field_validator("phone_number")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not validate_phone(v):
            raise ValueError("Invalid phone number")
        return v


class RegisterResponse(BaseModel):
    """Register response schema."""

    message: str
    success: bool = True
    user: UserResponse


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str
    role: Role


class LoginResponse(BaseModel):
    """Login response schema."""

    message: str
    access_token: str
    token_type: str
    success: bool = True
    user: UserResponse
