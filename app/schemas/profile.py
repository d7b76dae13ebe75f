"""Profile schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProfileResponse(BaseModel):
    """Candidate profile as returned to its owner."""

    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    auto_apply: bool = False
    resume_url: Optional[str] = None
    resume_original_name: Optional[str] = None
    profile_photo: Optional[str] = None

    class Config:
        from_attributes = True
