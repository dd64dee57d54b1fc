"""
Tracking API - session, page-view and action ingestion from the site's tracker script
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_admin, get_db, get_identity
from backend.app.core.exceptions import PortalException
from backend.app.core.identity import Identity
from backend.app.core.logging_config import get_logger
from backend.app.models.admin import Admin
from backend.app.schemas.tracking import (
    ActionTracked,
    PageViewOut,
    PageViewTracked,
    SessionEnded,
    SessionOut,
    TrackEventIn,
    TrackingCounts,
    TrackResponse,
    UserActionOut,
)
from backend.app.services.tracking_service import TrackingService

logger = get_logger("api.tracking")
router = APIRouter(prefix="/track", tags=["tracking"])

EVENT_TYPES = frozenset({"pageView", "action", "sessionEnd"})


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def _read_event(request: Request) -> TrackEventIn:
    """Parse and shape-check the tracking body before anything touches the DB"""
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise _bad_request("Invalid content type. Expected application/json")
    try:
        data = await request.json()
    except ValueError:
        raise _bad_request("Invalid JSON in request body")
    if not isinstance(data, dict):
        raise _bad_request("Missing required fields")

    try:
        event = TrackEventIn.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ()))
        raise _bad_request(f"Invalid field {field}: {first.get('msg')}")

    if not event.session_id or not event.event_type:
        raise _bad_request("Missing required fields")
    if event.event_type not in EVENT_TYPES:
        raise _bad_request("Invalid event type")
    return event


@router.post("", response_model=TrackResponse)
async def track_event(
    request: Request,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    """
    Record one tracking event.

    - **sessionId**: client-held session token (created on first sight)
    - **eventType**: pageView | action | sessionEnd
    - pageView needs **path** (optional **title**, **duration** for the closed view)
    - action needs **actionType** and **path** (optional **actionData**)
    - sessionEnd takes an optional **duration**
    """
    event = await _read_event(request)
    try:
        session = TrackingService.resolve_session(
            db,
            event.session_id,
            identity,
            user_agent=request.headers.get("user-agent"),
            referrer=request.headers.get("referer"),
            ip_address=request.client.host if request.client else None,
        )

        if event.event_type == "pageView":
            page_view = TrackingService.track_page_view(
                db, session, event.path, title=event.title, duration=event.duration
            )
            return PageViewTracked(page_view=PageViewOut.model_validate(page_view))

        if event.event_type == "action":
            action = TrackingService.record_action(
                db, session, event.action_type, event.path, event.action_data
            )
            return ActionTracked(user_action=UserActionOut.model_validate(action))

        session = TrackingService.close_session(db, session, duration=event.duration)
        return SessionEnded(session=SessionOut.model_validate(session))
    except PortalException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(
            "Tracking error session_id=%s event_type=%s error=%s",
            event.session_id,
            event.event_type,
            str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("", response_model=TrackingCounts)
def tracking_counts(
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    """Raw row counts of the tracking tables (admin only)"""
    return TrackingCounts(**TrackingService.counts(db))
