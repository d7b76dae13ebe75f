"""
Profile API
GET/PUT for the current user's profile, resume upload included.
A PUT may trigger auto-apply to matching jobs.
"""

from typing import Optional

import structlog
from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_db
from app.config import settings
from app.models.profile import Profile
from app.models.user import User
from app.schemas.profile import ProfileResponse
from app.schemas.user import ProfileUpdateResponse, UserResponse
from app.services.auto_apply_service import AutoApplyService
from app.services.resume_storage import delete_resume, save_resume
from app.utils.validators import parse_skills, validate_file_extension, validate_phone

logger = structlog.get_logger(__name__)

router = APIRouter()


def _get_or_create_profile(user: User) -> Profile:
    if user.profile is None:
        user.profile = Profile(skills=[], auto_apply=False)
    return user.profile


async def _read_resume(resume: UploadFile) -> bytes:
    """Validate and read an uploaded resume"""
    if not validate_file_extension(resume.filename, settings.ALLOWED_RESUME_EXTENSIONS):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid file type. Allowed: {', '.join(settings.ALLOWED_RESUME_EXTENSIONS)}",
        )

    content = await resume.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded resume is empty",
        )
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File too large. Maximum size: {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB",
        )
    return content


@router.get("", response_model=ProfileResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    """
    Get the current user's profile

    **Auth**: JWT cookie or Bearer token
    """
    return ProfileResponse.model_validate(_get_or_create_profile(current_user))


@router.put("", response_model=ProfileUpdateResponse)
async def update_profile(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    skills: Optional[str] = Form(None, description="Comma-separated, e.g. 'React,Node'"),
    auto_apply: Optional[bool] = Form(None),
    resume: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Update the current user's profile

    **Auth**: JWT cookie or Bearer token

    Only non-empty fields are applied. When skills change while auto-apply
    is on, or auto-apply is switched on, the user is applied to every job
    whose requirements their skills cover at or above the match threshold.
    """
    if email and email != current_user.email:
        try:
            email = validate_email(email, check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid email: {e}",
            )

        result = await db.execute(
            select(User).where(User.email == email, User.id != current_user.id)
        )
        if result.scalar_one_or_none():
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User already exists with this email",
            )

    if phone_number and not validate_phone(phone_number):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid phone number",
        )

    resume_content = await _read_resume(resume) if resume is not None and resume.filename else None

    profile = _get_or_create_profile(current_user)

    # Edge-triggered: only an off -> on switch in this request counts
    auto_apply_enabled_now = not profile.auto_apply and auto_apply is True
    skills_updated = bool(skills)

    if fullname:
        current_user.fullname = fullname
    if email:
        current_user.email = email
    if phone_number:
        current_user.phone_number = phone_number
    if bio:
        profile.bio = bio
    if skills_updated:
        profile.skills = parse_skills(skills)
    if auto_apply is not None:
        profile.auto_apply = auto_apply

    old_resume_url = None
    new_resume_url = None
    if resume_content is not None:
        old_resume_url = profile.resume_url
        new_resume_url = save_resume(resume_content, resume.filename, str(current_user.id))
        profile.resume_url = new_resume_url
        profile.resume_original_name = resume.filename

    try:
        await db.flush()

        auto_applied_count = await AutoApplyService(db).run_for_profile_update(
            profile,
            skills_updated=skills_updated,
            auto_apply_enabled_now=auto_apply_enabled_now,
        )

        await db.commit()
    except Exception:
        # The row change is rolled back, so the freshly stored file is orphaned
        if new_resume_url:
            delete_resume(new_resume_url)
        raise

    if old_resume_url:
        delete_resume(old_resume_url)

    logger.info(
        "profile_updated",
        user_id=str(current_user.id),
        skills_updated=skills_updated,
        auto_apply=profile.auto_apply,
        auto_applied_count=auto_applied_count,
    )

    message = "Profile updated successfully."
    if auto_applied_count > 0:
        message += f" Auto-applied to {auto_applied_count} matching jobs!"

    return ProfileUpdateResponse(
        message=message,
        auto_applied_count=auto_applied_count,
        user=UserResponse.model_validate(current_user),
    )
