"""
University service - student counts, guarded delete, display ordering
"""
from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.core.exceptions import BusinessRuleViolation, ResourceNotFound
from backend.app.models.student import Student
from backend.app.models.university import University


class UniversityService:
    @staticmethod
    def get_university(db: Session, university_id: str) -> University:
        university = db.query(University).filter(University.id == university_id).first()
        if not university:
            raise ResourceNotFound("University")
        return university

    @staticmethod
    def student_counts(db: Session, university_ids: list[str]) -> dict[str, int]:
        if not university_ids:
            return {}
        rows = (
            db.query(Student.university_id, func.count(Student.id))
            .filter(Student.university_id.in_(university_ids))
            .group_by(Student.university_id)
            .all()
        )
        return {row[0]: row[1] for row in rows}

    @staticmethod
    def delete_university(db: Session, university_id: str) -> None:
        """Delete unless students still reference the university"""
        university = UniversityService.get_university(db, university_id)
        if UniversityService.student_counts(db, [university.id]).get(university.id, 0) > 0:
            raise BusinessRuleViolation("Cannot delete university with associated students")
        db.delete(university)
        db.commit()

    @staticmethod
    def reorder(db: Session, ordered_ids: list[str]) -> None:
        """display_order = position in the list. Unknown ids are a 404 and nothing is saved."""
        universities = db.query(University).filter(University.id.in_(ordered_ids)).all()
        by_id = {u.id: u for u in universities}
        missing = [uid for uid in ordered_ids if uid not in by_id]
        if missing:
            raise ResourceNotFound("University")
        for index, uid in enumerate(ordered_ids):
            by_id[uid].display_order = index
        db.commit()
