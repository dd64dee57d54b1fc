"""
Event service - registrations bounded by capacity, one per student per event
"""
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.exceptions import BusinessRuleViolation, ResourceNotFound
from backend.app.core.logging_config import get_logger
from backend.app.models.event import Event, EventRegistration
from backend.app.models.student import Student

logger = get_logger("services.event")


class EventService:
    @staticmethod
    def get_event(db: Session, event_id: str) -> Event:
        event = db.query(Event).filter(Event.id == event_id).first()
        if not event:
            raise ResourceNotFound("Event")
        return event

    @staticmethod
    def registration_count(db: Session, event_id: str) -> int:
        return db.query(EventRegistration).filter(EventRegistration.event_id == event_id).count()

    @staticmethod
    def registration_counts(db: Session, event_ids: list[str]) -> dict[str, int]:
        """event id -> registrant count, one grouped query"""
        if not event_ids:
            return {}
        rows = (
            db.query(EventRegistration.event_id, func.count(EventRegistration.id))
            .filter(EventRegistration.event_id.in_(event_ids))
            .group_by(EventRegistration.event_id)
            .all()
        )
        return {row[0]: row[1] for row in rows}

    @staticmethod
    def is_registered(db: Session, event_id: str, student_id: str) -> bool:
        return (
            db.query(EventRegistration)
            .filter(EventRegistration.event_id == event_id, EventRegistration.student_id == student_id)
            .first()
            is not None
        )

    @staticmethod
    def register(
        db: Session,
        event_id: str,
        student_id: str,
        duplicate_message: str = "You are already registered for this event",
    ) -> EventRegistration:
        """
        Register a student. A full event is reported before a duplicate registration.
        """
        event = EventService.get_event(db, event_id)
        student = db.query(Student).filter(Student.id == student_id).first()
        if not student:
            raise ResourceNotFound("Student")

        if event.capacity and EventService.registration_count(db, event_id) >= event.capacity:
            raise BusinessRuleViolation("Event has reached maximum capacity")

        if EventService.is_registered(db, event_id, student_id):
            raise BusinessRuleViolation(duplicate_message)

        registration = EventRegistration(event_id=event_id, student_id=student_id)
        try:
            db.add(registration)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise BusinessRuleViolation(duplicate_message)
        db.refresh(registration)
        logger.info("Event registration event_id=%s student_id=%s", event_id, student_id)
        return registration

    @staticmethod
    def delete_registration(db: Session, event_id: str, registration_id: str) -> None:
        registration = (
            db.query(EventRegistration)
            .filter(EventRegistration.id == registration_id, EventRegistration.event_id == event_id)
            .first()
        )
        if not registration:
            raise ResourceNotFound("Registration")
        db.delete(registration)
        db.commit()
