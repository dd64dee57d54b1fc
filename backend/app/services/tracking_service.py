"""
Tracking service - visitor sessions, page-view spans and user actions.

Sessions are keyed by the client-held session token. A session starts anonymous
or identified; an anonymous session becomes identified at most once, the first
time a tracking call arrives with an identity cookie. Identified sessions never
change identity.
"""
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.orm import Session

from backend.app.core.exceptions import ValidationFailure
from backend.app.core.identity import Identity
from backend.app.core.logging_config import get_logger
from backend.app.models.enums import ActionType, UserType
from backend.app.models.tracking import PageView, UserAction, UserSession

logger = get_logger("services.tracking")


def _elapsed_seconds(since: datetime, now: datetime) -> int:
    return max(int((now - since).total_seconds()), 0)


def _apply_identity(session: UserSession, identity: Identity) -> None:
    session.user_type = identity.user_type.value
    session.user_id = identity.user_id
    session.student_id = identity.user_id if identity.user_type is UserType.STUDENT else None
    session.employer_id = identity.user_id if identity.user_type is UserType.EMPLOYER else None


class TrackingService:
    """Session resolution plus the three tracking operations"""

    @staticmethod
    def resolve_session(
        db: Session,
        session_id: str,
        identity: Identity,
        user_agent: Optional[str] = None,
        referrer: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> UserSession:
        """
        Get the session for session_id, creating it if absent.
        An existing anonymous session is upgraded to the given identity (one way only).
        Two racing creates for the same session_id are settled by the unique
        constraint; the loser's commit fails and is not retried.
        """
        if not session_id:
            raise ValidationFailure("sessionId is required")

        session = db.query(UserSession).filter(UserSession.session_id == session_id).first()
        if session is None:
            session = UserSession(
                session_id=session_id,
                user_agent=user_agent or None,
                referrer=referrer or None,
                ip_address=ip_address or None,
                start_time=datetime.utcnow(),
            )
            _apply_identity(session, identity)
            db.add(session)
            db.commit()
            db.refresh(session)
            logger.info(
                "Tracking session created session_id=%s user_type=%s",
                session_id,
                session.user_type,
            )
            return session

        if TrackingService.identify(session, identity):
            db.commit()
            db.refresh(session)
            logger.info(
                "Tracking session identified session_id=%s user_type=%s",
                session_id,
                session.user_type,
            )
        return session

    @staticmethod
    def identify(session: UserSession, identity: Identity) -> bool:
        """
        Anonymous -> Identified(role, id) transition. Returns True if the session changed.
        Anonymous identities never change a session; identified sessions are final.
        """
        if identity.is_anonymous:
            return False
        if session.is_identified:
            if session.user_id != identity.user_id or session.user_type != identity.user_type.value:
                logger.warning(
                    "Ignoring identity change on identified session session_id=%s current=%s requested=%s",
                    session.session_id,
                    session.user_type,
                    identity.user_type.value,
                )
            return False
        _apply_identity(session, identity)
        return True

    @staticmethod
    def track_page_view(
        db: Session,
        session: UserSession,
        path: str,
        title: Optional[str] = None,
        duration: Optional[int] = None,
    ) -> PageView:
        """
        Close the most recent open view of this path (if any), then open a new one.
        duration is the client-measured time on the closed view; a missing or zero
        duration is replaced by the elapsed server time.
        """
        if not path:
            raise ValidationFailure("Path is required for pageView events")

        now = datetime.utcnow()
        open_view = (
            db.query(PageView)
            .filter(
                PageView.session_pk == session.id,
                PageView.path == path,
                PageView.exit_time.is_(None),
            )
            .order_by(PageView.entry_time.desc())
            .first()
        )
        if open_view is not None:
            open_view.exit_time = now
            open_view.duration = duration or _elapsed_seconds(open_view.entry_time, now)

        page_view = PageView(session_pk=session.id, path=path, title=title or None, entry_time=now)
        db.add(page_view)
        db.commit()
        db.refresh(page_view)
        return page_view

    @staticmethod
    def record_action(
        db: Session,
        session: UserSession,
        action_type: str,
        path: str,
        action_data: Optional[dict[str, Any]] = None,
    ) -> UserAction:
        """Append one user action; payload defaults to an empty object"""
        if not action_type or not path:
            raise ValidationFailure("ActionType and path are required for action events")
        try:
            action = ActionType(action_type)
        except ValueError:
            raise ValidationFailure(f"Invalid actionType: {action_type}")

        user_action = UserAction(
            session_pk=session.id,
            action_type=action.value,
            action_data=action_data or {},
            path=path,
            timestamp=datetime.utcnow(),
        )
        db.add(user_action)
        db.commit()
        db.refresh(user_action)
        return user_action

    @staticmethod
    def close_session(
        db: Session,
        session: UserSession,
        duration: Optional[int] = None,
    ) -> UserSession:
        """
        Stamp end time and duration (elapsed time when missing or zero), then close
        every open page view of the session.
        Closed page views keep a null duration. Calling twice re-stamps the session.
        """
        now = datetime.utcnow()
        session.end_time = now
        session.duration = duration or _elapsed_seconds(session.start_time, now)

        closed = (
            db.query(PageView)
            .filter(PageView.session_pk == session.id, PageView.exit_time.is_(None))
            .update({PageView.exit_time: now}, synchronize_session=False)
        )
        db.commit()
        db.refresh(session)
        logger.info(
            "Tracking session ended session_id=%s duration=%s closed_page_views=%s",
            session.session_id,
            session.duration,
            closed,
        )
        return session

    @staticmethod
    def counts(db: Session) -> dict:
        """Raw row counts across the tracking tables"""
        return {
            "session_count": db.query(UserSession).count(),
            "page_view_count": db.query(PageView).count(),
            "action_count": db.query(UserAction).count(),
        }
