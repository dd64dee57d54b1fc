"""
Event and EventRegistration - one registration per (event, student), bounded by capacity
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, generate_id
from backend.app.models.enums import EventType


class Event(Base):
    __tablename__ = "events"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    event_type = Column(String(20), default=EventType.OTHER.value, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    end_date = Column(DateTime, nullable=True)
    location = Column(String(255), nullable=False)
    capacity = Column(Integer, nullable=True)  # None = unlimited
    image_url = Column(String(1024), nullable=True)
    registration_link = Column(String(1024), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    registrations = relationship(
        "EventRegistration", back_populates="event", cascade="all, delete-orphan"
    )


class EventRegistration(Base):
    __tablename__ = "event_registrations"
    __table_args__ = (UniqueConstraint("event_id", "student_id", name="uq_event_registration"),)

    id = Column(String(32), primary_key=True, default=generate_id)
    event_id = Column(String(32), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(String(32), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    event = relationship("Event", back_populates="registrations")
    student = relationship("Student", back_populates="event_registrations")
