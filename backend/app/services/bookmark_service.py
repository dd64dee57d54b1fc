"""
Bookmark service - saved jobs per student
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.exceptions import BusinessRuleViolation, ResourceNotFound
from backend.app.models.bookmark import BookmarkedJob
from backend.app.models.job import Job


class BookmarkService:
    @staticmethod
    def get_bookmark(db: Session, student_id: str, job_id: str) -> BookmarkedJob | None:
        return (
            db.query(BookmarkedJob)
            .filter(BookmarkedJob.student_id == student_id, BookmarkedJob.job_id == job_id)
            .first()
        )

    @staticmethod
    def add_bookmark(db: Session, student_id: str, job_id: str) -> BookmarkedJob:
        if not db.query(Job).filter(Job.id == job_id).first():
            raise ResourceNotFound("Job")
        if BookmarkService.get_bookmark(db, student_id, job_id):
            raise BusinessRuleViolation("Job already bookmarked")

        bookmark = BookmarkedJob(student_id=student_id, job_id=job_id)
        try:
            db.add(bookmark)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise BusinessRuleViolation("Job already bookmarked")
        db.refresh(bookmark)
        return bookmark

    @staticmethod
    def remove_bookmark(db: Session, student_id: str, job_id: str) -> None:
        bookmark = BookmarkService.get_bookmark(db, student_id, job_id)
        if not bookmark:
            raise ResourceNotFound("Bookmark")
        db.delete(bookmark)
        db.commit()
