"""
BookmarkedJob - saved jobs per student (unique per student/job pair)
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, generate_id


class BookmarkedJob(Base):
    __tablename__ = "bookmarked_jobs"
    __table_args__ = (UniqueConstraint("student_id", "job_id", name="uq_bookmarked_job"),)

    id = Column(String(32), primary_key=True, default=generate_id)
    student_id = Column(String(32), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String(32), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    student = relationship("Student", back_populates="bookmarks")
    job = relationship("Job", back_populates="bookmarks")
