from datetime import datetime

from sqlalchemy import Column, DateTime, String

from backend.app.db.base import Base, generate_id
from backend.app.models.enums import AdminRole


class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), default=AdminRole.ADMIN.value, nullable=False)  # ADMIN, SUPER_ADMIN

    created_at = Column(DateTime, default=datetime.utcnow)
