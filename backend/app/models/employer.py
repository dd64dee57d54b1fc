"""
Employer - posts jobs (capped at max_active_jobs_per_employer)
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, generate_id


class Employer(Base):
    __tablename__ = "employers"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    designation = Column(String(255), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    jobs = relationship("Job", back_populates="employer", cascade="all, delete-orphan")
