"""
Saved Jobs API
Users can bookmark jobs and list their bookmarks
"""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_db
from app.models.job import Job
from app.models.saved_job import SavedJob
from app.models.user import User
from app.schemas.saved_job import (
    BookmarkToggleResponse,
    SavedJobResponse,
    SavedJobsResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/{job_id}", response_model=BookmarkToggleResponse)
async def toggle_bookmark(
    job_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Bookmark a job, or remove the bookmark if it is already saved

    **Auth**: JWT cookie or Bearer token
    """
    # Check if job exists
    result = await db.execute(
        select(Job).where(Job.id == job_id)
    )
    job = result.scalar_one_or_none()

    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Job with id {job_id} not found"
        )

    # Check if already saved
    result = await db.execute(
        select(SavedJob).where(
            SavedJob.user_id == current_user.id,
            SavedJob.job_id == job_id
        )
    )
    existing = result.scalar_one_or_none()

    if existing:
        await db.delete(existing)
        await db.commit()
        logger.info("bookmark_removed", user_id=str(current_user.id), job_id=str(job_id))
        return BookmarkToggleResponse(
            message="Job removed from bookmarks",
            is_bookmarked=False,
        )

    db.add(SavedJob(user_id=current_user.id, job_id=job_id))
    await db.commit()
    logger.info("bookmark_added", user_id=str(current_user.id), job_id=str(job_id))

    return BookmarkToggleResponse(
        message="Job bookmarked successfully",
        is_bookmarked=True,
    )


@router.get("", response_model=SavedJobsResponse)
async def list_saved_jobs(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    List all bookmarked jobs, most recently saved first

    **Auth**: JWT cookie or Bearer token
    """
    result = await db.execute(
        select(SavedJob)
        .where(SavedJob.user_id == current_user.id)
        .order_by(SavedJob.saved_at.desc())
    )
    saved_jobs = result.scalars().all()

    return SavedJobsResponse(
        total=len(saved_jobs),
        saved_jobs=[SavedJobResponse.model_validate(saved_job) for saved_job in saved_jobs]
    )


@router.get("/check/{job_id}")
async def check_if_saved(
    job_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Check if a job is already saved

    **Auth**: JWT cookie or Bearer token

    Useful for UI to show "Saved" vs "Save" button
    """
    result = await db.execute(
        select(SavedJob).where(
            SavedJob.user_id == current_user.id,
            SavedJob.job_id == job_id
        )
    )
    saved_job = result.scalar_one_or_none()

    return {
        "job_id": str(job_id),
        "is_saved": saved_job is not None,
    }
