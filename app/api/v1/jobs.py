"""Job endpoints - Post and browse jobs."""

from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_recruiter, get_db
from app.config import settings
from app.models.application import Application
from app.models.job import Job
from app.models.user import User
from app.schemas.job import JobCreate, JobDetailResponse, JobListResponse, JobResponse

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_in: JobCreate,
    current_user: User = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db),
):
    """
    Post a new job

    **Auth**: Recruiter
    """
    job = Job(**job_in.model_dump(), created_by=current_user.id)
    db.add(job)
    await db.commit()

    logger.info("job_created", job_id=str(job.id), created_by=str(current_user.id))
    return JobResponse.model_validate(job)


@router.get("", response_model=JobListResponse)
async def list_jobs(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"),
    keyword: Optional[str] = Query(None, description="Match title or description (case-insensitive)"),
    db: AsyncSession = Depends(get_db),
):
    """
    Get paginated list of jobs, newest first

    **Filters:**
    - `keyword`: partial match on title or description
    """
    filters = []
    if keyword:
        filters.append(
            or_(
                Job.title.ilike(f"%{keyword}%"),
                Job.description.ilike(f"%{keyword}%"),
            )
        )

    total_result = await db.execute(select(func.count(Job.id)).where(*filters))
    total = total_result.scalar() or 0

    result = await db.execute(
        select(Job)
        .where(*filters)
        .order_by(Job.created_at.desc())
        .offset((page - 1) * size)
        .limit(size)
    )
    jobs = result.scalars().all()

    return JobListResponse(
        total=total,
        page=page,
        size=size,
        jobs=[JobResponse.model_validate(job) for job in jobs],
    )


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get a single job with its application count."""
    result = await db.execute(select(Job).where(Job.id == job_id))
    job = result.scalar_one_or_none()

    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Job with id {job_id} not found",
        )

    count_result = await db.execute(
        select(func.count(Application.id)).where(Application.job_id == job_id)
    )

    return JobDetailResponse(
        **JobResponse.model_validate(job).model_dump(),
        application_count=count_result.scalar() or 0,
    )
