"""Application schemas."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from app.schemas.job import JobResponse


class ApplicationResponse(BaseModel):
    """A user's application to a job."""

    id: UUID
    job_id: UUID
    applicant_id: UUID
    status: str
    is_auto_applied: bool
    match_score: Optional[float] = None
    created_at: datetime
    job: Optional[JobResponse] = None

    class Config:
        from_attributes = True


class ApplicationsResponse(BaseModel):
    """List of applications."""

    total: int
    applications: List[ApplicationResponse]
