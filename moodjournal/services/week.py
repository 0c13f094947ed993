"""Week arithmetic on naive local wall-clock datetimes.

Weeks run Monday through Sunday. Boundaries keep the time of day of the
reference date, so a week window is exactly six days long, not seven
calendar days.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Any

from moodjournal.config import settings
from moodjournal.utils.constants import MONTH_ABBR

logger = logging.getLogger(__name__)


def to_local(value: datetime) -> datetime:
    """Drop tzinfo after converting aware datetimes to the configured zone."""
    if value.tzinfo is None:
        return value
    # astimezone(None) converts to the system local zone
    return value.astimezone(settings.timezone).replace(tzinfo=None)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 string or datetime into local time, or None if unusable."""
    if isinstance(value, datetime):
        return to_local(value)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Unparseable timestamp: %r", value)
        return None
    return to_local(parsed)


def get_week_start(value: datetime) -> datetime:
    # weekday(): Monday=0, so Sunday steps back six days, never forward one
    value = to_local(value)
    return value - timedelta(days=value.weekday())


def get_week_end(value: datetime) -> datetime:
    return get_week_start(value) + timedelta(days=6)


def get_day_of_week_index(value: datetime) -> int:
    """0 for Monday through 6 for Sunday."""
    return value.weekday()


def shift_week(value: datetime, weeks: int) -> datetime:
    return value + timedelta(days=7 * weeks)


def format_week_range(start: datetime, end: datetime) -> str:
    """Render e.g. "Jun 3 - Jun 9".

    The year is never shown, even when the range crosses New Year.
    """
    return f"{MONTH_ABBR[start.month - 1]} {start.day} - {MONTH_ABBR[end.month - 1]} {end.day}"
