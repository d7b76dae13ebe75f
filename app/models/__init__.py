"""Database models."""

# Import all models in dependency order to ensure proper relationship initialization

# Base models (no foreign keys)
from app.models.user import User

# Models with foreign keys to base models
from app.models.profile import Profile
from app.models.job import Job

# Models with foreign keys to other models
from app.models.application import Application
from app.models.saved_job import SavedJob

# Export all models
__all__ = [
    "User",
    "Profile",
    "Job",
    "Application",
    "SavedJob",
]
