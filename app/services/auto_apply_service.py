"""
Auto-apply service.
Creates applications for every job a candidate's skills match well enough,
triggered from profile updates.
"""

from typing import List, Set
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.application import Application
from app.models.job import Job
from app.models.profile import Profile
from app.services.skill_matcher import calculate_match
from app.utils.constants import APPLICATION_STATUS_PENDING

logger = structlog.get_logger(__name__)


def should_auto_apply(
    profile: Profile,
    skills_updated: bool,
    auto_apply_enabled_now: bool,
) -> bool:
    """
    Decide whether a profile update should start an auto-apply scan.

    Evaluated against the post-update profile:
    - skills were part of the update, auto-apply is on and skills are non-empty, or
    - auto-apply was switched from off to on by this update and skills are non-empty.
    """
    has_skills = bool(profile.skills)
    if skills_updated and profile.auto_apply and has_skills:
        return True
    return auto_apply_enabled_now and has_skills


class AutoApplyService:
    """
    Scans all jobs and applies on the candidate's behalf.

    The scan runs inside the caller's session; nothing is committed here.
    A failure part-way through propagates, and the request's unit of work
    (profile change included) is rolled back by the session dependency.
    """

    def __init__(self, db: AsyncSession, threshold: float = None):
        """
        Args:
            db: Database session of the current request
            threshold: Minimum match percentage to apply (defaults to settings)
        """
        self.db = db
        self.threshold = (
            settings.AUTO_APPLY_MATCH_THRESHOLD if threshold is None else threshold
        )

    async def run_for_profile_update(
        self,
        profile: Profile,
        skills_updated: bool,
        auto_apply_enabled_now: bool,
    ) -> int:
        """
        Run the scan if the update triggers it.

        Returns:
            Number of applications created (0 when not triggered)
        """
        if not should_auto_apply(profile, skills_updated, auto_apply_enabled_now):
            return 0

        logger.info(
            "auto_apply_triggered",
            user_id=str(profile.user_id),
            skills_updated=skills_updated,
            auto_apply_enabled_now=auto_apply_enabled_now,
        )
        return await self.apply_to_matching_jobs(profile)

    async def apply_to_matching_jobs(self, profile: Profile) -> int:
        """
        Create pending, auto-applied applications for every job scoring at or
        above the threshold that the user has not applied to yet.

        Args:
            profile: Post-update candidate profile

        Returns:
            Number of applications created
        """
        jobs = await self._get_all_jobs()
        applied_job_ids = await self._get_applied_job_ids(profile.user_id)

        created = 0
        for job in jobs:
            score = calculate_match(profile.skills, job.requirements)
            if score < self.threshold:
                continue

            if job.id in applied_job_ids:
                continue

            if await self._create_application(job, profile.user_id, score):
                applied_job_ids.add(job.id)
                created += 1

        logger.info(
            "auto_apply_completed",
            user_id=str(profile.user_id),
            jobs_scanned=len(jobs),
            applications_created=created,
        )
        return created

    async def _get_all_jobs(self) -> List[Job]:
        result = await self.db.execute(select(Job).order_by(Job.created_at))
        return list(result.scalars().all())

    async def _get_applied_job_ids(self, user_id: UUID) -> Set[UUID]:
        """Job ids this user already has an application for (one query)."""
        result = await self.db.execute(
            select(Application.job_id).where(Application.applicant_id == user_id)
        )
        return set(result.scalars().all())

    async def _create_application(self, job: Job, user_id: UUID, score: float) -> bool:
        """
        Insert one application inside a savepoint.

        A unique-constraint violation means a concurrent request applied
        first; that counts as already applied, not as an error.
        """
        application = Application(
            job_id=job.id,
            applicant_id=user_id,
            status=APPLICATION_STATUS_PENDING,
            is_auto_applied=True,
            match_score=round(score, 2),
        )
        try:
            async with self.db.begin_nested():
                self.db.add(application)
        except IntegrityError:
            logger.info(
                "auto_apply_already_applied",
                user_id=str(user_id),
                job_id=str(job.id),
            )
            return False

        logger.info(
            "auto_applied",
            user_id=str(user_id),
            job_id=str(job.id),
            match_score=round(score, 2),
        )
        return True
