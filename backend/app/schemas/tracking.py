"""
Tracking ingestion and analytics schemas
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from backend.app.schemas.common import CamelModel


class TrackEventIn(CamelModel):
    """
    Body of POST /api/track.
    sessionId/eventType presence and per-event required fields are checked by the route
    so that each failure gets its own message.
    """
    session_id: str = ""
    event_type: str = ""
    path: str = ""
    title: Optional[str] = None
    # Negative durations are rejected; large values are stored as sent
    duration: Optional[int] = Field(None, ge=0)
    action_type: str = ""
    action_data: Optional[Dict[str, Any]] = None


class SessionOut(CamelModel):
    id: str
    session_id: str
    user_type: str
    user_id: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: Optional[int] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    referrer: Optional[str] = None


class PageViewOut(CamelModel):
    id: str
    session_pk: str
    path: str
    title: Optional[str] = None
    entry_time: datetime
    exit_time: Optional[datetime] = None
    duration: Optional[int] = None


class UserActionOut(CamelModel):
    id: str
    session_pk: str
    action_type: str
    action_data: Dict[str, Any] = {}
    path: str
    timestamp: datetime


class PageViewTracked(CamelModel):
    success: bool = True
    page_view: PageViewOut


class ActionTracked(CamelModel):
    success: bool = True
    user_action: UserActionOut


class SessionEnded(CamelModel):
    success: bool = True
    session: SessionOut


# Exactly one record key per response, null fields included
TrackResponse = Union[PageViewTracked, ActionTracked, SessionEnded]


class TrackingCounts(CamelModel):
    session_count: int
    page_view_count: int
    action_count: int


# --- Analytics ---
class UserTypeCount(CamelModel):
    user_type: str
    count: int


class PathCount(CamelModel):
    path: str
    count: int


class ActionTypeCount(CamelModel):
    action_type: str
    count: int


class DailyCount(CamelModel):
    date: str
    count: int


class AnalyticsSummary(CamelModel):
    start_date: datetime
    end_date: Optional[datetime] = None
    total_sessions: int
    active_sessions: int
    total_page_views: int
    total_actions: int
    average_session_duration: float
    user_type_distribution: List[UserTypeCount]
    top_pages: List[PathCount]
    top_actions: List[ActionTypeCount]
    daily_active_users: List[DailyCount]
