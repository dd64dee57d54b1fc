"""
Events API - public event listing, event detail and student registration
"""
from datetime import datetime

from fastapi import APIRouter, Cookie, Depends, Query, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.app.core.config import EVENTS_PAGE_SIZE
from backend.app.core.dependencies import get_current_student_id, get_db
from backend.app.core.exceptions import ValidationFailure
from backend.app.models.enums import EventType
from backend.app.models.event import Event
from backend.app.schemas.event import EventDetail, EventOut, EventPage, RegistrationIn, RegistrationOut
from backend.app.services.event_service import EventService
from backend.app.utils.dates import parse_date
from backend.app.utils.pagination import FilterSpec, PageParams, page_params, paginate

router = APIRouter(prefix="/events", tags=["events"])

EVENT_FILTERS = FilterSpec(
    search_fields=(Event.title, Event.description, Event.location),
    exact_fields={"eventType": Event.event_type},
    date_range=(Event.date, "startDate", "endDate"),
)


class RegistrationCreated(BaseModel):
    message: str
    registration: RegistrationOut


def event_outputs(db: Session, events: list[Event]) -> list[EventOut]:
    """EventOut list with registrant counts filled from one grouped query"""
    counts = EventService.registration_counts(db, [e.id for e in events])
    return [
        EventOut.model_validate(e).model_copy(update={"registration_count": counts.get(e.id, 0)})
        for e in events
    ]


def status_clause(event_status: str | None, now: datetime):
    """upcoming: date >= now, past: date < now, all: no clause"""
    if event_status in (None, "", "upcoming"):
        return Event.date >= now
    if event_status == "past":
        return Event.date < now
    if event_status == "all":
        return None
    raise ValidationFailure(f"Invalid status: {event_status}")


@router.get("", response_model=EventPage)
def list_events(
    event_type: str | None = Query(None, alias="eventType"),
    search: str | None = Query(None),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    event_status: str | None = Query(None, alias="status"),
    paging: PageParams = Depends(page_params(EVENTS_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    """
    Events ordered by date ascending. status defaults to upcoming and is combined with
    any startDate/endDate range.
    """
    query = EVENT_FILTERS.apply(db.query(Event), {
        "eventType": event_type,
        "search": search,
        "startDate": parse_date(start_date, "startDate"),
        "endDate": parse_date(end_date, "endDate", end_of_day=True),
    })
    clause = status_clause(event_status, datetime.utcnow())
    if clause is not None:
        query = query.filter(clause)

    events, pagination = paginate(query, paging.page, paging.page_size, (Event.date.asc(), Event.id))
    return EventPage(
        items=event_outputs(db, events),
        pagination=pagination,
        event_types=[t.value for t in EventType],
    )


@router.get("/{event_id}", response_model=EventDetail)
def get_event(
    event_id: str,
    student_id: str | None = Cookie(None, alias="studentId"),
    db: Session = Depends(get_db),
):
    """Event detail; isRegistered reflects the studentId cookie when present"""
    event = EventService.get_event(db, event_id)
    count = EventService.registration_count(db, event_id)
    return EventDetail(
        event=EventOut.model_validate(event).model_copy(update={"registration_count": count}),
        is_registered=bool(student_id) and EventService.is_registered(db, event_id, student_id),
        registration_count=count,
    )


@router.post("/register", response_model=RegistrationCreated, status_code=status.HTTP_201_CREATED)
def register_for_event(
    payload: RegistrationIn,
    student_id: str = Depends(get_current_student_id),
    db: Session = Depends(get_db),
):
    """Register the calling student. Full events and repeat registrations are 400."""
    registration = EventService.register(db, payload.event_id, student_id)
    return RegistrationCreated(
        message="Successfully registered for the event",
        registration=RegistrationOut.model_validate(registration),
    )
