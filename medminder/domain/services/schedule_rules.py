"""
Schedule rule engine.

Pure functions deciding whether a recurring schedule fires on a calendar day
and at which instants.
"""

from datetime import date, datetime, time, tzinfo

from medminder.core.utils.date_utils import iso_weekday, to_date
from medminder.domain.entities.schedule import Schedule


def is_active_for_day(schedule: Schedule, day: date | datetime) -> bool:
    """
    Check whether ``schedule`` produces doses on the calendar day of ``day``.

    A datetime is reduced to its own local calendar day. ``end_date`` is
    inclusive and an empty ``days_of_week`` means every day.
    """
    if not schedule.is_active:
        return False

    calendar_day = to_date(day)
    if calendar_day < schedule.start_date:
        return False
    if schedule.end_date is not None and calendar_day > schedule.end_date:
        return False

    if not schedule.days_of_week:
        return True
    return iso_weekday(calendar_day) in schedule.days_of_week


def parse_time_of_day(value: str) -> time:
    """
    Parse an ``HH:mm`` string.

    Schedules are validated when written, so a malformed value here is a
    programming error and raises ``ValueError``.
    """
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def time_to_instant(day: date | datetime, value: str, tz: tzinfo) -> datetime:
    """Combine the calendar day of ``day`` with ``HH:mm`` in ``tz``, zero seconds."""
    return datetime.combine(to_date(day), parse_time_of_day(value), tzinfo=tz)
