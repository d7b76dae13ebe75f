"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import applications, auth, jobs
from app.api.v1.endpoints import profile, resumes, saved_jobs

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
api_router.include_router(resumes.router, prefix="/resumes", tags=["Profile"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
api_router.include_router(applications.router, prefix="/applications", tags=["Applications"])
api_router.include_router(saved_jobs.router, prefix="/saved-jobs", tags=["Saved Jobs"])
