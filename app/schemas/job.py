"""Job schemas for API requests and responses."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class JobCreate(BaseModel):
    """Payload for posting a job."""

    title: str = Field(..., min_length=1, max_length=500)
    company_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    requirements: List[str] = Field(default_factory=list, description="Required skills, e.g. ['Python', 'SQL']")
    location: Optional[str] = Field(None, max_length=255)
    job_type: Optional[str] = Field(None, max_length=50)
    salary: Optional[str] = Field(None, max_length=100)

    @field_validator("requirements")
    @classmethod
    def strip_requirements(cls, v: List[str]) -> List[str]:
        """Drop blank requirement entries."""
        return [req.strip() for req in v if req and req.strip()]


class JobResponse(BaseModel):
    """Job as listed to users."""

    id: UUID
    title: str
    company_name: str
    description: Optional[str] = None
    requirements: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary: Optional[str] = None
    created_by: Optional[UUID] = None
    created_at: datetime

    class Config:
        from_attributes = True


class JobDetailResponse(JobResponse):
    """Single job with its application count."""

    application_count: int = 0


class JobListResponse(BaseModel):
    """Paginated job listing."""

    total: int
    page: int
    size: int
    jobs: List[JobResponse]
