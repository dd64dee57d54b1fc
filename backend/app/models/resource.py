"""
Resource - downloadable learning material (PDFs, videos, links) grouped by category
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from backend.app.db.base import Base, generate_id


class Resource(Base):
    __tablename__ = "resources"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(50), nullable=False)  # PDF, VIDEO, LINK, ...
    category = Column(String(100), nullable=False, index=True)
    file_url = Column(String(1024), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
