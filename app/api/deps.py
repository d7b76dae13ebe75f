"""
API Dependencies
Common dependencies for API endpoints (authentication, authorization, etc.)

get_db is re-exported, not wrapped: FastAPI caches dependencies per callable,
so routes and get_current_user share one session per request.
"""

from fastapi import Depends

from app.core.security import Role, get_current_user, require_role
from app.db.session import get_db
from app.models.user import User


async def get_current_recruiter(
    current_user: User = Depends(require_role(Role.RECRUITER)),
) -> User:
    """
    Get current user and verify they can post jobs
    """
    return current_user


__all__ = ["get_db", "get_current_user", "get_current_recruiter"]
