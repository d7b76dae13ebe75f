"""
Resume storage
Local filesystem or S3, selected by RESUME_STORAGE_TYPE
"""

import uuid
from pathlib import Path
from typing import Optional

import boto3
import structlog

from app.config import settings

logger = structlog.get_logger(__name__)

RESUME_URL_PREFIX = "/api/v1/resumes/"


def get_storage_dir() -> Path:
    """Root directory for locally stored resumes (created on demand)."""
    storage_dir = Path(settings.RESUME_STORAGE_DIR)
    storage_dir.mkdir(parents=True, exist_ok=True)
    return storage_dir


def save_resume(file_content: bytes, filename: str, user_id: str) -> str:
    """Upload resume to storage (local or S3) and return URL"""
    storage_type = settings.RESUME_STORAGE_TYPE.lower()

    if storage_type == "s3":
        return upload_resume_to_s3(file_content, filename, user_id)
    else:
        return upload_resume_local(file_content, filename, user_id)


def _unique_filename(filename: str) -> str:
    # Keep only the basename so client paths cannot escape the user directory
    return f"{uuid.uuid4()}_{Path(filename).name}"


def upload_resume_local(file_content: bytes, filename: str, user_id: str) -> str:
    """Upload resume to local storage and return URL path"""
    user_dir = get_storage_dir() / str(user_id)
    user_dir.mkdir(parents=True, exist_ok=True)

    unique_filename = _unique_filename(filename)
    file_path = user_dir / unique_filename

    with open(file_path, "wb") as f:
        f.write(file_content)

    logger.info("resume_stored", storage="local", user_id=str(user_id), path=str(file_path))

    # Relative URL served by the resumes route
    return f"{RESUME_URL_PREFIX}{user_id}/{unique_filename}"


def _s3_client():
    return boto3.client(
        "s3",
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_REGION,
    )


def upload_resume_to_s3(file_content: bytes, filename: str, user_id: str) -> str:
    """Upload resume to S3 and return URL"""
    unique_filename = _unique_filename(filename)
    s3_key = f"resumes/{user_id}/{unique_filename}"

    content_type = "application/pdf" if filename.lower().endswith(".pdf") else "application/octet-stream"
    _s3_client().put_object(
        Bucket=settings.S3_BUCKET_NAME,
        Key=s3_key,
        Body=file_content,
        ContentType=content_type,
    )

    logger.info("resume_stored", storage="s3", user_id=str(user_id), key=s3_key)

    return f"https://{settings.S3_BUCKET_NAME}.s3.{settings.AWS_REGION}.amazonaws.com/{s3_key}"


def resolve_local_resume(user_id: str, filename: str) -> Optional[Path]:
    """
    Path of a locally stored resume, or None when it does not exist or the
    requested name points outside the storage directory.
    """
    storage_dir = get_storage_dir().resolve()
    file_path = (storage_dir / str(user_id) / filename).resolve()
    if storage_dir not in file_path.parents or not file_path.is_file():
        return None
    return file_path


def delete_resume(resume_url: str):
    """Delete resume from storage (local or S3)"""
    if not resume_url:
        return

    if ".amazonaws.com/" in resume_url:
        delete_resume_from_s3(resume_url)
    else:
        delete_resume_local(resume_url)


def delete_resume_local(resume_url: str):
    """Delete resume from local storage"""
    if not resume_url.startswith(RESUME_URL_PREFIX):
        return

    relative_path = resume_url[len(RESUME_URL_PREFIX):]
    file_path = get_storage_dir() / relative_path
    try:
        if file_path.exists():
            file_path.unlink()
    except OSError as e:
        # Old file may already be gone; the new resume is what matters
        logger.warning("resume_delete_failed", storage="local", url=resume_url, error=str(e))


def delete_resume_from_s3(resume_url: str):
    """Delete resume from S3"""
    s3_key = resume_url.split(".amazonaws.com/")[-1]
    try:
        _s3_client().delete_object(Bucket=settings.S3_BUCKET_NAME, Key=s3_key)
    except Exception as e:
        logger.warning("resume_delete_failed", storage="s3", url=resume_url, error=str(e))
