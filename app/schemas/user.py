"""User schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from app.schemas.profile import ProfileResponse


class UserResponse(BaseModel):
    """User response schema."""

    id: UUID
    fullname: str
    email: str
    phone_number: str
    role: str
    is_active: bool
    created_at: datetime
    profile: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True


class ProfileUpdateResponse(BaseModel):
    """Result of a profile update, including the auto-apply outcome."""

    message: str
    auto_applied_count: int = 0
    user: UserResponse
    success: bool = True
