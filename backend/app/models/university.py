"""
University - partner institutions shown on the public site; ordered by display_order
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, generate_id


class University(Base):
    __tablename__ = "universities"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    website = Column(String(512), nullable=True)
    logo_url = Column(String(1024), nullable=True)
    description = Column(Text, nullable=True)
    partnership_benefits = Column(Text, nullable=True)
    is_partner = Column(Boolean, default=False, nullable=False)
    is_visible = Column(Boolean, default=True, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # No cascade: a university with students cannot be deleted
    students = relationship("Student", back_populates="university")
