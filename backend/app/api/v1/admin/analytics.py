"""
Admin analytics API - sessions, page views and actions summarised over a period
"""
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.core.exceptions import PortalException
from backend.app.core.logging_config import get_logger
from backend.app.models.admin import Admin
from backend.app.schemas.tracking import AnalyticsSummary
from backend.app.services.analytics_service import build_analytics_summary, resolve_date_range
from backend.app.utils import cache

logger = get_logger("api.analytics")
router = APIRouter(prefix="/admin/analytics", tags=["admin"])


def _cache_key(start: datetime, end: datetime | None) -> str:
    # Minute resolution so rolling periods still hit the cache within the TTL
    start_str = start.strftime("%Y-%m-%dT%H:%M")
    end_str = end.strftime("%Y-%m-%dT%H:%M") if end else "now"
    return f"analytics_summary:{start_str}:{end_str}"


@router.get("", response_model=AnalyticsSummary)
async def get_analytics(
    period: str = Query("day"),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    """
    Analytics summary. Query params:
    - period: day | week | month | year | custom (anything else reads as day)
    - startDate, endDate: YYYY-MM-DD; when both are given they override period
    Cached in Redis for analytics_cache_ttl seconds.
    """
    start, end = resolve_date_range(period, start_date, end_date)

    cache_key = _cache_key(start, end)
    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    try:
        summary = AnalyticsSummary(**build_analytics_summary(db, start, end))
    except PortalException:
        raise
    except Exception as e:
        logger.exception("Analytics query failed period=%s error=%s", period, str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    result = summary.model_dump(mode="json", by_alias=True)
    await cache.set(cache_key, result, ttl=settings.analytics_cache_ttl)
    return result
