# app/services/dates.py
"""
Calendar-date helpers shared by the API handlers and the client controller.
"""
import calendar
import re
from datetime import date, datetime, timezone
from typing import Any, Optional

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

WEEKDAY_NAMES = {
    "long": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "short": ["mon", "tue", "wed", "thu", "fri", "sat", "sun"],
}


def is_valid_date(value: Any) -> bool:
    """
    True iff ``value`` is a ``YYYY-MM-DD`` string naming a real calendar day.

    The string must survive a parse/format round trip unchanged, which
    rejects overflowing days such as ``2025-02-30``. Never raises.
    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return False
    return parsed.isoformat() == value


def parse_date(value: Any) -> Optional[date]:
    """Return the ``date`` for a valid date string, otherwise None."""
    if not is_valid_date(value):
        return None
    return date.fromisoformat(value)


def format_date(day: date) -> str:
    return day.isoformat()


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the last day of the month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def weekday_name(day: date, fmt: str = "long") -> str:
    return WEEKDAY_NAMES[fmt][day.weekday()]


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
