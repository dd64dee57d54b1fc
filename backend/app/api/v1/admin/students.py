"""
Admin students API - search, verification and deletion of student accounts
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.core.exceptions import ResourceNotFound
from backend.app.models.student import Student
from backend.app.schemas.common import MessageResponse, Page, patch_fields
from backend.app.schemas.user import StudentOut, StudentProfile, StudentUpdate
from backend.app.services.university_service import UniversityService
from backend.app.utils.pagination import FilterSpec, PageParams, page_params, paginate

router = APIRouter(prefix="/admin/students", tags=["admin"], dependencies=[Depends(get_current_admin)])

STUDENT_FILTERS = FilterSpec(
    search_fields=(Student.name, Student.email, Student.college),
    exact_fields={"universityId": Student.university_id},
    boolean_fields={"verified": Student.is_verified},
)


def _get_student(db: Session, student_id: str) -> Student:
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise ResourceNotFound("Student")
    return student


@router.get("", response_model=Page[StudentOut])
def list_students(
    search: str | None = Query(None),
    verified: bool | None = Query(None),
    university_id: str | None = Query(None, alias="universityId"),
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    query = STUDENT_FILTERS.apply(db.query(Student), {
        "search": search,
        "verified": verified,
        "universityId": university_id,
    })
    students, pagination = paginate(
        query, paging.page, paging.page_size, (Student.created_at.desc(), Student.id)
    )
    return Page[StudentOut](items=[StudentOut.model_validate(s) for s in students], pagination=pagination)


@router.get("/{student_id}", response_model=StudentProfile)
def get_student(student_id: str, db: Session = Depends(get_db)):
    return StudentProfile.model_validate(_get_student(db, student_id))


@router.patch("/{student_id}", response_model=StudentOut)
def update_student(student_id: str, payload: StudentUpdate, db: Session = Depends(get_db)):
    """Edit profile fields, verify, or move to another university (null detaches)"""
    student = _get_student(db, student_id)
    changes = patch_fields(payload, nullable=("university_id",))
    if changes.get("university_id"):
        UniversityService.get_university(db, changes["university_id"])
    for key, value in changes.items():
        setattr(student, key, value)
    db.commit()
    db.refresh(student)
    return StudentOut.model_validate(student)


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(student_id: str, db: Session = Depends(get_db)):
    """Delete a student with their registrations and bookmarks"""
    db.delete(_get_student(db, student_id))
    db.commit()
    return MessageResponse(message="Student deleted successfully")
