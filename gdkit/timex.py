"""Time zone helpers."""

from datetime import timedelta, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@lru_cache(maxsize=None)
def jakarta_location():
    """Return the Asia/Jakarta (WIB) time zone, or a fixed +07:00 zone if unavailable."""
    try:
        return ZoneInfo("Asia/Jakarta")
    except (ZoneInfoNotFoundError, ValueError):
        return timezone(timedelta(hours=7), "WIB")