"""
Saved job (bookmark) model
One row per (user, job) pair
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from app.db.base import Base


class SavedJob(Base):
    """
    Jobs bookmarked by users
    One-to-many relation with users table
    """
    __tablename__ = "saved_jobs"

    # Note: id, created_at, updated_at are inherited from Base class (UUID)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)

    saved_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="saved_jobs")
    job = relationship("Job", back_populates="saved_jobs", lazy="selectin")

    # Indexes
    __table_args__ = (
        Index("idx_saved_jobs_user", "user_id"),
        Index("idx_saved_jobs_user_job", "user_id", "job_id", unique=True),  # Prevent duplicates
    )

    def __repr__(self):
        return f"<SavedJob(user_id={self.user_id}, job_id={self.job_id})>"
