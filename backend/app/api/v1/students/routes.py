"""
Student API - saved jobs and the signed-in student's profile
"""
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session, joinedload

from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_student_id, get_db
from backend.app.core.exceptions import ResourceNotFound
from backend.app.core.logging_config import get_logger
from backend.app.models.bookmark import BookmarkedJob
from backend.app.models.job import Job
from backend.app.models.student import Student
from backend.app.schemas.common import MessageResponse, Page
from backend.app.schemas.job import BookmarkIn, BookmarkOut, BookmarkStatus
from backend.app.schemas.user import StudentProfile
from backend.app.services.bookmark_service import BookmarkService
from backend.app.utils.pagination import PageParams, page_params, paginate

logger = get_logger("api.students")
router = APIRouter(prefix="/students", tags=["students"])


class BookmarkCreated(BaseModel):
    message: str
    bookmark: BookmarkOut


@router.get("/bookmarks", response_model=Page[BookmarkOut])
def list_bookmarks(
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    student_id: str = Depends(get_current_student_id),
    db: Session = Depends(get_db),
):
    """Saved jobs, most recently saved first"""
    query = (
        db.query(BookmarkedJob)
        .options(joinedload(BookmarkedJob.job).joinedload(Job.employer))
        .filter(BookmarkedJob.student_id == student_id)
    )
    bookmarks, pagination = paginate(
        query, paging.page, paging.page_size, (BookmarkedJob.created_at.desc(), BookmarkedJob.id)
    )
    return Page[BookmarkOut](items=[BookmarkOut.model_validate(b) for b in bookmarks], pagination=pagination)


@router.post("/bookmarks", response_model=BookmarkCreated, status_code=status.HTTP_201_CREATED)
def add_bookmark(
    payload: BookmarkIn,
    student_id: str = Depends(get_current_student_id),
    db: Session = Depends(get_db),
):
    bookmark = BookmarkService.add_bookmark(db, student_id, payload.job_id)
    logger.info("Job bookmarked student_id=%s job_id=%s", student_id, payload.job_id)
    return BookmarkCreated(message="Job bookmarked", bookmark=BookmarkOut.model_validate(bookmark))


@router.get("/bookmarks/{job_id}", response_model=BookmarkStatus)
def bookmark_status(
    job_id: str,
    student_id: str = Depends(get_current_student_id),
    db: Session = Depends(get_db),
):
    bookmark = BookmarkService.get_bookmark(db, student_id, job_id)
    return BookmarkStatus(
        is_bookmarked=bookmark is not None,
        bookmark=BookmarkOut.model_validate(bookmark) if bookmark else None,
    )


@router.delete("/bookmarks/{job_id}", response_model=MessageResponse)
def remove_bookmark(
    job_id: str,
    student_id: str = Depends(get_current_student_id),
    db: Session = Depends(get_db),
):
    BookmarkService.remove_bookmark(db, student_id, job_id)
    return MessageResponse(message="Bookmark removed")


@router.get("/profile", response_model=StudentProfile)
def get_profile(
    student_id: str = Depends(get_current_student_id),
    db: Session = Depends(get_db),
):
    """The calling student with their event registrations"""
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise ResourceNotFound("Student")
    return StudentProfile.model_validate(student)
