"""Application model."""

from sqlalchemy import Boolean, Column, ForeignKey, Numeric, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from app.db.base import Base


class Application(Base):
    """Job application model."""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="unique_job_applicant_application"),
    )

    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    applicant_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Status tracking
    status = Column(String(20), nullable=False, default="pending")  # pending, accepted, rejected

    # Auto-apply bookkeeping
    is_auto_applied = Column(Boolean, nullable=False, default=False)
    match_score = Column(Numeric(5, 2))  # 0.00 - 100.00, set for auto applications

    # Relationships
    job = relationship("Job", back_populates="applications")
    applicant = relationship("User", back_populates="applications")

    def __repr__(self):
        return f"<Application {self.applicant_id} -> {self.job_id} ({self.status})>"
