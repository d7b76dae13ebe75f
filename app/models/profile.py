"""Profile model."""

from sqlalchemy import Boolean, Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.db.base import Base, JSONType


class Profile(Base):
    """Candidate profile, one per user."""

    __tablename__ = "profiles"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    bio = Column(Text)

    skills = Column(JSONType, default=list)  # ["React", "Node", ...]
    auto_apply = Column(Boolean, default=False, nullable=False)

    # Resume metadata
    resume_url = Column(String(500))
    resume_original_name = Column(String(255))
    profile_photo = Column(String(500))

    # Relationships
    user = relationship("User", back_populates="profile")

    def __repr__(self):
        return f"<Profile user_id={self.user_id} auto_apply={self.auto_apply}>"
