"""
Tests for date utilities.
"""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from medminder.core.utils.date_utils import (
    as_utc,
    day_key,
    day_window,
    iso_weekday,
    resolve_timezone,
    start_of_day,
)

WARSAW = ZoneInfo("Europe/Warsaw")


def test_resolve_timezone():
    assert resolve_timezone(None) is timezone.utc
    assert resolve_timezone("Europe/Warsaw") == WARSAW
    assert resolve_timezone(WARSAW) is WARSAW


def test_as_utc():
    naive = datetime(2024, 6, 12, 8, 0)
    local = datetime(2024, 6, 12, 10, 0, tzinfo=WARSAW)

    assert as_utc(naive) == datetime(2024, 6, 12, 8, 0, tzinfo=timezone.utc)
    assert as_utc(local).hour == 8
    assert as_utc(local).tzinfo is timezone.utc


def test_day_key_and_weekday():
    assert day_key(date(2024, 6, 2)) == "2024-06-02"
    assert iso_weekday(date(2024, 6, 16)) == 7


def test_day_window_spans_calendar_days():
    start, end = day_window(date(2024, 6, 12), WARSAW, days=7)

    assert start == start_of_day(date(2024, 6, 12), WARSAW)
    assert end - start == timedelta(days=7)
    assert end.date() == date(2024, 6, 19)


def test_day_window_across_dst_change():
    start, end = day_window(date(2024, 3, 31), WARSAW)

    assert end.date() == date(2024, 4, 1)
    assert (as_utc(end) - as_utc(start)) == timedelta(hours=23)
