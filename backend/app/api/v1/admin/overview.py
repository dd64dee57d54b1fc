"""
Admin overview API - entity counts for the dashboard header and the admin's own profile
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.models.admin import Admin
from backend.app.models.employer import Employer
from backend.app.models.enums import JobStatus
from backend.app.models.event import Event
from backend.app.models.job import Job
from backend.app.models.student import Student
from backend.app.models.university import University
from backend.app.schemas.common import CamelModel
from backend.app.schemas.user import AdminOut

router = APIRouter(prefix="/admin", tags=["admin"])


class AdminStats(CamelModel):
    student_count: int
    employer_count: int
    job_count: int
    pending_job_count: int
    event_count: int
    university_count: int


class AdminProfile(CamelModel):
    admin: AdminOut


@router.get("/stats", response_model=AdminStats)
def get_stats(
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    return AdminStats(
        student_count=db.query(Student).count(),
        employer_count=db.query(Employer).count(),
        job_count=db.query(Job).count(),
        pending_job_count=db.query(Job).filter(Job.status == JobStatus.PENDING.value).count(),
        event_count=db.query(Event).count(),
        university_count=db.query(University).count(),
    )


@router.get("/profile", response_model=AdminProfile)
def get_profile(admin: Admin = Depends(get_current_admin)):
    return AdminProfile(admin=AdminOut.model_validate(admin))
