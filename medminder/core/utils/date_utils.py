"""
Date and time utility functions.

Wall-clock helpers shared by the dose engines. Every instant handled by the
engines is timezone-aware and expressed in the configured local zone, so that
"today" means the user's calendar day rather than the UTC one.
"""

from collections.abc import Callable
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]

DAY_KEY_FORMAT = "%Y-%m-%d"


def resolve_timezone(name: str | tzinfo | None) -> tzinfo:
    """
    Return a tzinfo for an IANA name, passing tzinfo objects through.

    ``None`` resolves to UTC.
    """
    if name is None:
        return timezone.utc
    if isinstance(name, tzinfo):
        return name
    return ZoneInfo(name)


def local_now(tz: tzinfo) -> datetime:
    """Current wall-clock time in ``tz``."""
    return datetime.now(tz)


def system_clock(tz: tzinfo) -> Clock:
    """Build a clock callable returning the current time in ``tz``."""
    return lambda: local_now(tz)


def as_utc(dt: datetime) -> datetime:
    """
    Ensure a datetime is timezone-aware as UTC.

    If the datetime is naive (no timezone), assume it's UTC.
    If it has a timezone, convert it to UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_date(value: datetime | date) -> date:
    """Calendar day of a date or datetime (datetimes keep their own zone)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def iso_weekday(value: datetime | date) -> int:
    """Weekday numbered 1=Monday .. 7=Sunday."""
    return to_date(value).isoweekday()


def day_key(value: datetime | date) -> str:
    """Format a calendar day as ``yyyy-MM-dd``."""
    return to_date(value).strftime(DAY_KEY_FORMAT)


def start_of_day(day: datetime | date, tz: tzinfo) -> datetime:
    """Local midnight starting ``day``."""
    return datetime.combine(to_date(day), time.min, tzinfo=tz)


def day_window(day: datetime | date, tz: tzinfo, days: int = 1) -> tuple[datetime, datetime]:
    """
    Inclusive instant range covering ``days`` calendar days from ``day``.

    The upper bound is local midnight after the last day, matching the
    [today, tomorrow] window used when preloading dose statuses.
    """
    start = start_of_day(day, tz)
    end = start_of_day(to_date(day) + timedelta(days=days), tz)
    return start, end
