"""
Job - internship/job posting owned by one Employer; admins approve or reject
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, generate_id
from backend.app.models.enums import JobStatus


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(32), primary_key=True, default=generate_id)
    employer_id = Column(String(32), ForeignKey("employers.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(50), nullable=False)  # Internship, Full-Time, ...
    location = Column(String(255), nullable=False)
    stipend = Column(String(100), nullable=False)
    duration = Column(String(100), nullable=False)
    apply_link = Column(String(1024), nullable=False)
    is_remote = Column(Boolean, default=False, nullable=False)
    is_paid = Column(Boolean, default=True, nullable=False)
    is_short_term = Column(Boolean, default=False, nullable=False)
    required_degree = Column(String(255), nullable=True)
    status = Column(String(20), default=JobStatus.PENDING.value, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    employer = relationship("Employer", back_populates="jobs")
    bookmarks = relationship("BookmarkedJob", back_populates="job", cascade="all, delete-orphan")
