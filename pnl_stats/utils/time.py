"""Time utilities (IST)."""

from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

IST = ZoneInfo("Asia/Kolkata")


def ensure_aware(dt: datetime, naive_assumed_tz: Optional[tzinfo] = None) -> datetime:
    """
    Attach a timezone to a naive datetime, leaving aware values untouched.

    Aware values keep their own offset: calendar fields (date, weekday,
    day of month) are read in the offset the API reported.
    """
    if dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=naive_assumed_tz or IST)


def resolve_timezone(name: str) -> tzinfo:
    """Look up an IANA timezone name, falling back to IST for blanks."""
    if not name:
        return IST
    return ZoneInfo(name)
