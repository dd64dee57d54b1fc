"""
Admin events API - CRUD, sorting, and registration management
"""
from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.api.v1.events.routes import EVENT_FILTERS, event_outputs, status_clause
from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.core.exceptions import ValidationFailure
from backend.app.core.logging_config import get_logger
from backend.app.models.event import Event, EventRegistration
from backend.app.schemas.common import MessageResponse, Page, patch_fields
from backend.app.schemas.event import (
    AdminEventDetail,
    AdminRegistrationIn,
    EventCreate,
    EventOut,
    EventUpdate,
    RegistrationList,
    RegistrationOut,
)
from backend.app.services.event_service import EventService
from backend.app.utils.pagination import PageParams, page_params, paginate

logger = get_logger("api.admin.events")
router = APIRouter(prefix="/admin/events", tags=["admin"], dependencies=[Depends(get_current_admin)])

SORT_COLUMNS = {
    "date": Event.date,
    "title": Event.title,
    "createdAt": Event.created_at,
}

NULLABLE_FIELDS = ("end_date", "capacity", "image_url", "registration_link")


def _registrations(db: Session, event_id: str) -> list[EventRegistration]:
    return (
        db.query(EventRegistration)
        .filter(EventRegistration.event_id == event_id)
        .order_by(EventRegistration.created_at)
        .all()
    )


@router.get("", response_model=Page[EventOut])
def list_events(
    search: str | None = Query(None),
    event_type: str | None = Query(None, alias="eventType"),
    event_status: str = Query("all", alias="status"),
    sort_by: str = Query("date", alias="sortBy"),
    sort_order: str = Query("asc", alias="sortOrder"),
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    """status: all (default) | upcoming | past. sortBy: date | title | createdAt."""
    if sort_by not in SORT_COLUMNS:
        raise ValidationFailure(f"Invalid sortBy: {sort_by}")
    if sort_order not in ("asc", "desc"):
        raise ValidationFailure(f"Invalid sortOrder: {sort_order}")

    query = EVENT_FILTERS.apply(db.query(Event), {"search": search, "eventType": event_type})
    clause = status_clause(event_status, datetime.utcnow())
    if clause is not None:
        query = query.filter(clause)

    column = SORT_COLUMNS[sort_by]
    order = column.desc() if sort_order == "desc" else column.asc()
    events, pagination = paginate(query, paging.page, paging.page_size, (order, Event.id))
    return Page[EventOut](items=event_outputs(db, events), pagination=pagination)


@router.post("", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    data = payload.model_dump()
    data["event_type"] = payload.event_type.value
    event = Event(**data)
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Event created event_id=%s", event.id)
    return EventOut.model_validate(event)


@router.get("/{event_id}", response_model=AdminEventDetail)
def get_event(event_id: str, db: Session = Depends(get_db)):
    """Event with its registrations and their students"""
    event = EventService.get_event(db, event_id)
    registrations = [RegistrationOut.model_validate(r) for r in _registrations(db, event_id)]
    return AdminEventDetail.model_validate(event).model_copy(
        update={"registrations": registrations, "registration_count": len(registrations)}
    )


@router.patch("/{event_id}", response_model=EventOut)
def update_event(event_id: str, payload: EventUpdate, db: Session = Depends(get_db)):
    event = EventService.get_event(db, event_id)
    for key, value in patch_fields(payload, nullable=NULLABLE_FIELDS).items():
        if key == "event_type":
            value = payload.event_type.value
        setattr(event, key, value)
    db.commit()
    db.refresh(event)
    return event_outputs(db, [event])[0]


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(event_id: str, db: Session = Depends(get_db)):
    """Delete an event together with its registrations"""
    db.delete(EventService.get_event(db, event_id))
    db.commit()
    logger.info("Event deleted event_id=%s", event_id)
    return MessageResponse(message="Event deleted successfully")


@router.get("/{event_id}/registrations", response_model=RegistrationList)
def list_registrations(event_id: str, db: Session = Depends(get_db)):
    event = EventService.get_event(db, event_id)
    registrations = [RegistrationOut.model_validate(r) for r in _registrations(db, event_id)]
    return RegistrationList(registrations=registrations, count=len(registrations), capacity=event.capacity)


@router.post(
    "/{event_id}/registrations",
    response_model=RegistrationOut,
    status_code=status.HTTP_201_CREATED,
)
def add_registration(event_id: str, payload: AdminRegistrationIn, db: Session = Depends(get_db)):
    """Register a student on their behalf; capacity and uniqueness still apply"""
    registration = EventService.register(
        db,
        event_id,
        payload.student_id,
        duplicate_message="Student is already registered for this event",
    )
    return RegistrationOut.model_validate(registration)


@router.delete("/{event_id}/registrations/{registration_id}", response_model=MessageResponse)
def delete_registration(event_id: str, registration_id: str, db: Session = Depends(get_db)):
    EventService.get_event(db, event_id)
    EventService.delete_registration(db, event_id, registration_id)
    return MessageResponse(message="Registration deleted successfully")
