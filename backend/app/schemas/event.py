"""
Event and registration Pydantic schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from backend.app.models.enums import EventType
from backend.app.schemas.common import CamelModel, Page


class EventCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    date: datetime
    location: str = Field(min_length=1)
    event_type: EventType = EventType.OTHER
    end_date: Optional[datetime] = None
    capacity: Optional[int] = Field(None, ge=1)
    image_url: Optional[str] = None
    registration_link: Optional[str] = None


class EventUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    event_type: Optional[EventType] = None
    end_date: Optional[datetime] = None
    capacity: Optional[int] = Field(None, ge=1)
    image_url: Optional[str] = None
    registration_link: Optional[str] = None


class EventOut(CamelModel):
    id: str
    title: str
    description: str
    event_type: str
    date: datetime
    end_date: Optional[datetime] = None
    location: str
    capacity: Optional[int] = None
    image_url: Optional[str] = None
    registration_link: Optional[str] = None
    registration_count: int = 0
    created_at: Optional[datetime] = None


class EventPage(Page[EventOut]):
    event_types: List[str]


class EventDetail(CamelModel):
    event: EventOut
    is_registered: bool
    registration_count: int


class RegistrationIn(CamelModel):
    event_id: str = Field(min_length=1)


class AdminRegistrationIn(CamelModel):
    student_id: str = Field(min_length=1)


class RegistrantOut(CamelModel):
    id: str
    name: str
    email: str
    college: str
    degree: Optional[str] = None
    year: Optional[int] = None


class RegistrationOut(CamelModel):
    id: str
    event_id: str
    student_id: str
    student: Optional[RegistrantOut] = None
    created_at: Optional[datetime] = None


class RegistrationList(CamelModel):
    registrations: List[RegistrationOut]
    count: int
    capacity: Optional[int] = None


class AdminEventDetail(EventOut):
    registrations: List[RegistrationOut] = []
