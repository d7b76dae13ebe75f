"""Application endpoints - Apply to jobs and list own applications."""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.api.deps import get_current_user, get_db
from app.models.application import Application
from app.models.job import Job
from app.models.user import User
from app.schemas.application import ApplicationResponse, ApplicationsResponse
from app.schemas.job import JobResponse
from app.utils.constants import APPLICATION_STATUS_PENDING

logger = structlog.get_logger(__name__)

router = APIRouter()

ALREADY_APPLIED = "You have already applied for this job"


@router.post("/{job_id}", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def apply_to_job(
    job_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Apply to a job manually

    **Auth**: JWT cookie or Bearer token
    """
    result = await db.execute(select(Job).where(Job.id == job_id))
    job = result.scalar_one_or_none()
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Job with id {job_id} not found",
        )

    result = await db.execute(
        select(Application).where(
            Application.job_id == job_id,
            Application.applicant_id == current_user.id,
        )
    )
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ALREADY_APPLIED,
        )

    application = Application(
        job_id=job.id,
        applicant_id=current_user.id,
        status=APPLICATION_STATUS_PENDING,
        is_auto_applied=False,
    )
    try:
        async with db.begin_nested():
            db.add(application)
    except IntegrityError:
        # Lost a race with a concurrent apply (manual or auto)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ALREADY_APPLIED,
        )
    await db.commit()

    logger.info("applied", user_id=str(current_user.id), job_id=str(job.id))

    return ApplicationResponse(
        id=application.id,
        job_id=application.job_id,
        applicant_id=application.applicant_id,
        status=application.status,
        is_auto_applied=application.is_auto_applied,
        match_score=None,
        created_at=application.created_at,
        job=JobResponse.model_validate(job),
    )


@router.get("/me", response_model=ApplicationsResponse)
async def list_my_applications(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the current user's applications, newest first

    **Auth**: JWT cookie or Bearer token
    """
    result = await db.execute(
        select(Application)
        .options(selectinload(Application.job))
        .where(Application.applicant_id == current_user.id)
        .order_by(Application.created_at.desc())
    )
    applications = result.scalars().all()

    return ApplicationsResponse(
        total=len(applications),
        applications=[ApplicationResponse.model_validate(a) for a in applications],
    )
