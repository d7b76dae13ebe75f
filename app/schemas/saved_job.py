"""Saved job (bookmark) schemas."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from app.schemas.job import JobResponse


class BookmarkToggleResponse(BaseModel):
    """Outcome of toggling a bookmark."""

    message: str
    is_bookmarked: bool
    success: bool = True


class SavedJobResponse(BaseModel):
    """A bookmarked job."""

    id: UUID
    job_id: UUID
    job: Optional[JobResponse] = None
    saved_at: datetime

    class Config:
        from_attributes = True


class SavedJobsResponse(BaseModel):
    """All bookmarks of the current user."""

    total: int
    saved_jobs: List[SavedJobResponse]
