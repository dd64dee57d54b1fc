"""
Declarative base shared by all models
"""
import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    """Opaque string primary key"""
    return uuid.uuid4().hex
