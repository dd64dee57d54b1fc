"""
Analytics service - summary statistics over tracking data for the admin dashboard
"""
from datetime import datetime, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.core.config import TOP_PAGES_LIMIT
from backend.app.core.exceptions import ValidationFailure
from backend.app.models.tracking import PageView, UserAction, UserSession
from backend.app.utils.dates import parse_date, shift_months


def resolve_date_range(
    period: str | None = "day",
    start_date: str | None = None,
    end_date: str | None = None,
    now: datetime | None = None,
) -> tuple[datetime, datetime | None]:
    """
    Map query parameters to a (start, end) window. end is None for open-ended periods.
    An explicit startDate/endDate pair wins over period; the end day is inclusive.
    "custom" without a full pair, or any unrecognised period, falls back to "day".
    """
    now = now or datetime.utcnow()

    if start_date and end_date:
        start = parse_date(start_date, "startDate")
        end = parse_date(end_date, "endDate", end_of_day=True)
        if end < start:
            raise ValidationFailure("endDate must not be before startDate")
        return start, end

    if period == "week":
        return now - timedelta(days=7), None
    if period == "month":
        return shift_months(now, 1), None
    if period == "year":
        return shift_months(now, 12), None
    return now.replace(hour=0, minute=0, second=0, microsecond=0), None


def _window(column, start: datetime, end: datetime | None) -> list:
    clauses = [column >= start]
    if end is not None:
        clauses.append(column <= end)
    return clauses


def build_analytics_summary(db: Session, start: datetime, end: datetime | None) -> dict:
    """
    Build the full analytics summary from DB queries over [start, end].
    Read-only. Any query error propagates to the caller.
    """
    session_window = _window(UserSession.start_time, start, end)
    view_window = _window(PageView.entry_time, start, end)
    action_window = _window(UserAction.timestamp, start, end)

    total_sessions = db.query(func.count(UserSession.id)).filter(*session_window).scalar() or 0
    active_sessions = (
        db.query(func.count(UserSession.id))
        .filter(*session_window, UserSession.end_time.is_(None))
        .scalar()
        or 0
    )
    total_page_views = db.query(func.count(PageView.id)).filter(*view_window).scalar() or 0
    total_actions = db.query(func.count(UserAction.id)).filter(*action_window).scalar() or 0

    avg_duration = (
        db.query(func.avg(UserSession.duration))
        .filter(*session_window, UserSession.duration.isnot(None))
        .scalar()
    )

    # Sessions per user type
    type_rows = (
        db.query(UserSession.user_type, func.count(UserSession.id))
        .filter(*session_window)
        .group_by(UserSession.user_type)
        .order_by(func.count(UserSession.id).desc())
        .all()
    )
    user_type_distribution = [{"user_type": row[0], "count": row[1]} for row in type_rows]

    # Most viewed paths
    path_count = func.count(PageView.id).label("c")
    page_rows = (
        db.query(PageView.path, path_count)
        .filter(*view_window)
        .group_by(PageView.path)
        .order_by(path_count.desc(), PageView.path)
        .limit(TOP_PAGES_LIMIT)
        .all()
    )
    top_pages = [{"path": row[0], "count": row[1]} for row in page_rows]

    # All action types, most frequent first
    action_count = func.count(UserAction.id).label("c")
    action_rows = (
        db.query(UserAction.action_type, action_count)
        .filter(*action_window)
        .group_by(UserAction.action_type)
        .order_by(action_count.desc(), UserAction.action_type)
        .all()
    )
    top_actions = [{"action_type": row[0], "count": row[1]} for row in action_rows]

    # Distinct identified users per day of session start
    day = func.date(UserSession.start_time)
    day_rows = (
        db.query(day.label("d"), func.count(func.distinct(UserSession.user_id)).label("c"))
        .filter(*session_window, UserSession.user_id.isnot(None))
        .group_by(day)
        .order_by(day)
        .all()
    )
    daily_active_users = [{"date": str(row[0]), "count": row[1]} for row in day_rows]

    return {
        "start_date": start,
        "end_date": end,
        "total_sessions": total_sessions,
        "active_sessions": active_sessions,
        "total_page_views": total_page_views,
        "total_actions": total_actions,
        "average_session_duration": float(avg_duration) if avg_duration is not None else 0,
        "user_type_distribution": user_type_distribution,
        "top_pages": top_pages,
        "top_actions": top_actions,
        "daily_active_users": daily_active_users,
    }
