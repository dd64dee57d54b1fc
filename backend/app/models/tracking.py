"""
Tracking models - visitor sessions, page-view spans and discrete user actions.
Rows are retained for analytics and never deleted by the application.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, JSON
from sqlalchemy.orm import relationship

from backend.app.db.base import Base, generate_id
from backend.app.models.enums import UserType


class UserSession(Base):
    __tablename__ = "user_sessions"

    id = Column(String(32), primary_key=True, default=generate_id)
    # Client-generated opaque correlation token; uniqueness rejects racing creates
    session_id = Column(String(255), unique=True, nullable=False, index=True)

    user_type = Column(String(20), default=UserType.ANONYMOUS.value, nullable=False, index=True)
    user_id = Column(String(32), nullable=True, index=True)
    student_id = Column(String(32), nullable=True)
    employer_id = Column(String(32), nullable=True)

    start_time = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    end_time = Column(DateTime, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds

    user_agent = Column(String(1024), nullable=True)
    ip_address = Column(String(64), nullable=True)
    referrer = Column(String(2048), nullable=True)

    page_views = relationship("PageView", back_populates="session", cascade="all, delete-orphan")
    actions = relationship("UserAction", back_populates="session", cascade="all, delete-orphan")

    @property
    def is_identified(self) -> bool:
        return self.user_id is not None


class PageView(Base):
    __tablename__ = "page_views"

    id = Column(String(32), primary_key=True, default=generate_id)
    session_pk = Column(String(32), ForeignKey("user_sessions.id", ondelete="CASCADE"), nullable=False, index=True)

    path = Column(String(2048), nullable=False)
    title = Column(String(512), nullable=True)
    entry_time = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    exit_time = Column(DateTime, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds

    session = relationship("UserSession", back_populates="page_views")


class UserAction(Base):
    __tablename__ = "user_actions"

    id = Column(String(32), primary_key=True, default=generate_id)
    session_pk = Column(String(32), ForeignKey("user_sessions.id", ondelete="CASCADE"), nullable=False, index=True)

    action_type = Column(String(50), nullable=False, index=True)
    action_data = Column(JSON, default=dict)
    path = Column(String(2048), nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    session = relationship("UserSession", back_populates="actions")
