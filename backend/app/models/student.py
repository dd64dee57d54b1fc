"""
Student - portal user who browses jobs, registers for events, bookmarks jobs
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, JSON
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, generate_id


class Student(Base):
    __tablename__ = "students"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)

    college = Column(String(255), nullable=False)
    degree = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    interests = Column(JSON, default=list)  # ["Data Science", ...]
    cv_path = Column(String(512), nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)

    university_id = Column(String(32), ForeignKey("universities.id"), nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    university = relationship("University", back_populates="students")
    event_registrations = relationship(
        "EventRegistration", back_populates="student", cascade="all, delete-orphan"
    )
    bookmarks = relationship("BookmarkedJob", back_populates="student", cascade="all, delete-orphan")
