"""Serve locally stored resumes."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from app.services.resume_storage import resolve_local_resume

router = APIRouter()


@router.get("/{user_id}/{filename}")
async def download_resume(user_id: str, filename: str):
    """Return a resume uploaded to local storage."""
    file_path = resolve_local_resume(user_id, filename)
    if file_path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resume not found",
        )
    return FileResponse(file_path, filename=filename.split("_", 1)[-1])
