"""
Dependency injection utilities
"""
from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from backend.app.core.exceptions import AuthenticationRequired
from backend.app.core.identity import Identity, resolve_identity
from backend.app.db.session import SessionLocal
from backend.app.models.admin import Admin


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_identity(
    student_id: str | None = Cookie(None, alias="studentId"),
    employer_id: str | None = Cookie(None, alias="employerId"),
    admin_id: str | None = Cookie(None, alias="adminId"),
) -> Identity:
    """Resolved identity for tracking. Never fails; anonymous when no cookie is set."""
    return resolve_identity(student_id, employer_id, admin_id)


def get_current_student_id(student_id: str | None = Cookie(None, alias="studentId")) -> str:
    """studentId cookie, presence-checked only"""
    if not student_id:
        raise AuthenticationRequired()
    return student_id


def get_current_employer_id(employer_id: str | None = Cookie(None, alias="employerId")) -> str:
    """employerId cookie, presence-checked only"""
    if not employer_id:
        raise AuthenticationRequired()
    return employer_id


def get_current_admin(
    admin_id: str | None = Cookie(None, alias="adminId"),
    db: Session = Depends(get_db),
) -> Admin:
    """adminId cookie that names an existing admin"""
    if not admin_id:
        raise AuthenticationRequired("Unauthorized - No admin ID found")
    admin = db.query(Admin).filter(Admin.id == admin_id).first()
    if not admin:
        raise AuthenticationRequired("Unauthorized - Invalid admin ID")
    return admin
