"""
Date helpers for query parameters and period arithmetic
"""
import calendar
from datetime import datetime

from backend.app.core.exceptions import ValidationFailure


def parse_date(value: str | None, field: str, end_of_day: bool = False) -> datetime | None:
    """
    Parse a YYYY-MM-DD (or ISO datetime, date part only) string to a naive datetime.
    end_of_day moves the result to 23:59:59.999999 so the day is included in a range.
    """
    if not value:
        return None
    try:
        parsed = datetime.strptime(value.strip()[:10], "%Y-%m-%d")
    except ValueError:
        raise ValidationFailure(f"Invalid {field}: expected YYYY-MM-DD")
    if end_of_day:
        parsed = parsed.replace(hour=23, minute=59, second=59, microsecond=999999)
    return parsed


def shift_months(dt: datetime, months: int) -> datetime:
    """dt moved back by `months` calendar months, clamping the day (Mar 31 -> Feb 28)."""
    total = dt.year * 12 + (dt.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)
