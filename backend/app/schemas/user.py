"""
Account schemas for students, employers and admins (signup, login, profile output)
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from backend.app.models.enums import AdminRole
from backend.app.schemas.common import CamelModel
from backend.app.schemas.event import EventOut


class LoginIn(CamelModel):
    """Schema for login (all roles)"""
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class StudentSignup(CamelModel):
    """Schema for student registration"""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    college: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    year: int = Field(ge=1, le=6)
    interests: List[str] = Field(min_length=1)
    university_id: Optional[str] = None


class EmployerSignup(CamelModel):
    """Schema for employer registration"""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    company: str = Field(min_length=1)
    designation: str = Field(min_length=1)


class AdminSignup(CamelModel):
    """Schema for admin registration"""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: AdminRole = AdminRole.ADMIN


class UniversityRef(CamelModel):
    id: str
    name: str


class StudentOut(CamelModel):
    """Student without password"""
    id: str
    name: str
    email: str
    college: str
    degree: str
    year: int
    interests: List[str] = []
    cv_path: Optional[str] = None
    is_verified: bool = False
    university_id: Optional[str] = None
    university: Optional[UniversityRef] = None
    created_at: Optional[datetime] = None


class StudentUpdate(CamelModel):
    """Admin-editable student fields"""
    name: Optional[str] = None
    email: Optional[str] = None
    college: Optional[str] = None
    degree: Optional[str] = None
    year: Optional[int] = Field(None, ge=1, le=6)
    interests: Optional[List[str]] = None
    is_verified: Optional[bool] = None
    university_id: Optional[str] = None


class EmployerOut(CamelModel):
    id: str
    name: str
    email: str
    company: str
    designation: str
    created_at: Optional[datetime] = None


class EmployerListItem(EmployerOut):
    job_count: int = 0


class AdminOut(CamelModel):
    id: str
    name: str
    email: str
    role: str
    created_at: Optional[datetime] = None


class StudentAuthResponse(CamelModel):
    message: str
    student: StudentOut


class EmployerAuthResponse(CamelModel):
    message: str
    employer: EmployerOut


class AdminAuthResponse(CamelModel):
    message: str
    admin: AdminOut


class StudentEventRegistration(CamelModel):
    id: str
    event: EventOut
    created_at: Optional[datetime] = None


class StudentProfile(StudentOut):
    """Student plus the events they registered for"""
    event_registrations: List[StudentEventRegistration] = []
