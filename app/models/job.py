"""Job model."""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.db.base import Base, JSONType


class Job(Base):
    """Job posting model."""

    __tablename__ = "jobs"

    title = Column(String(500), nullable=False, index=True)
    description = Column(Text)
    company_name = Column(String(255), nullable=False)

    # Job details
    requirements = Column(JSONType, default=list)  # ["Python", "FastAPI", ...]
    location = Column(String(255))
    job_type = Column(String(50))  # fulltime, parttime, internship, contract
    salary = Column(String(100))

    created_by = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
    saved_jobs = relationship("SavedJob", back_populates="job", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Job {self.title} @ {self.company_name}>"
