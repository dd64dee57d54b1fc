"""
Job and bookmark Pydantic schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from backend.app.models.enums import JobStatus
from backend.app.schemas.common import CamelModel


class JobCreate(CamelModel):
    """Employer job posting. All string fields are required."""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    type: str = Field(min_length=1)
    location: str = Field(min_length=1)
    stipend: str = Field(min_length=1)
    duration: str = Field(min_length=1)
    apply_link: str = Field(min_length=1)
    is_remote: bool = False
    is_paid: bool = True
    is_short_term: bool = False
    required_degree: Optional[str] = None


class JobUpdate(CamelModel):
    """Admin patch - approve/reject or edit fields"""
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    stipend: Optional[str] = None
    duration: Optional[str] = None
    apply_link: Optional[str] = None
    is_remote: Optional[bool] = None
    is_paid: Optional[bool] = None
    is_short_term: Optional[bool] = None
    required_degree: Optional[str] = None
    status: Optional[JobStatus] = None


class EmployerSummary(CamelModel):
    id: str
    name: str
    company: str


class JobOut(CamelModel):
    id: str
    title: str
    description: str
    type: str
    location: str
    stipend: str
    duration: str
    apply_link: str
    is_remote: bool
    is_paid: bool
    is_short_term: bool
    required_degree: Optional[str] = None
    status: str
    employer_id: str
    employer: Optional[EmployerSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookmarkIn(CamelModel):
    job_id: str = Field(min_length=1)


class BookmarkOut(CamelModel):
    id: str
    student_id: str
    job_id: str
    job: Optional[JobOut] = None
    created_at: Optional[datetime] = None


class BookmarkStatus(CamelModel):
    is_bookmarked: bool
    bookmark: Optional[BookmarkOut] = None
