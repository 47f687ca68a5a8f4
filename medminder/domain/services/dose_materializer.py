"""
Dose materializer.

Turns schedules, medications and a calendar day into the list of doses the
user is expected to take, without a stored row per dose. Status comes from an
injected override lookup when the user has acted on a dose, otherwise it is
inferred from the wall clock:

- a past dose on an earlier day is missed;
- a past dose today is missed only once the grace period has elapsed;
- anything else is pending.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta, tzinfo
from typing import Protocol

from medminder.core.config import Settings, get_settings
from medminder.core.utils.date_utils import Clock, day_key, system_clock, to_date
from medminder.domain.entities.dose import (
    DoseStatus,
    DoseStatusOverride,
    GeneratedDose,
    make_dose_key,
)
from medminder.domain.entities.medication import Medication
from medminder.domain.entities.schedule import Schedule
from medminder.domain.services.schedule_rules import is_active_for_day, time_to_instant

logger = logging.getLogger(__name__)


class DoseStatusLookup(Protocol):
    """Read side of the dose status store."""

    def get_status(self, key: str) -> DoseStatusOverride | None: ...


class DoseMaterializer:
    """
    Generates doses for a day or a week from recurring schedules.

    Calls are idempotent: given the same inputs, the same overrides and the
    same clock reading, the output (including identity keys) is identical.
    Inputs are never mutated.
    """

    def __init__(
        self,
        status_lookup: DoseStatusLookup,
        tz: tzinfo | None = None,
        clock: Clock | None = None,
        grace_period: timedelta | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize the materializer.

        Args:
            status_lookup: Source of explicit taken/skipped overrides
            tz: Wall-clock time zone, defaults to ``TIMEZONE`` from settings
            clock: Callable returning "now", defaults to the system clock in ``tz``
            grace_period: How long a dose due today stays pending after its time
            settings: Settings instance, defaults to ``get_settings()``
        """
        self._settings = settings or get_settings()
        self.status_lookup = status_lookup
        self.tz = tz or self._settings.tzinfo
        self.clock = clock or system_clock(self.tz)
        self.grace_period = (
            grace_period
            if grace_period is not None
            else timedelta(minutes=self._settings.MISSED_DOSE_GRACE_MINUTES)
        )

    def now(self) -> datetime:
        return self.clock().astimezone(self.tz)

    def local_date(self, value: date | datetime | None = None) -> date:
        """
        Calendar day of ``value`` in the configured zone, today when omitted.

        Aware datetimes are converted first; naive ones and dates are taken as local.
        """
        if value is None:
            return self.now().date()
        if isinstance(value, datetime) and value.tzinfo is not None:
            return value.astimezone(self.tz).date()
        return to_date(value)

    def generate_doses_for_date(
        self,
        schedules: Iterable[Schedule],
        medications: Iterable[Medication],
        day: date | datetime,
        user_id: str,
    ) -> list[GeneratedDose]:
        """
        Generate the doses of ``user_id`` for one calendar day.

        Args:
            schedules: Schedules to expand
            medications: Medications referenced by the schedules
            day: The calendar day to generate
            user_id: Owner recorded on every dose

        Returns:
            Doses sorted by scheduled time
        """
        calendar_day = self.local_date(day)
        now = self.now()
        medications_by_id = {medication.id: medication for medication in medications}
        doses: list[GeneratedDose] = []

        for schedule in schedules:
            if not is_active_for_day(schedule, calendar_day):
                continue

            # May be None if the medication was deleted meanwhile
            medication = medications_by_id.get(schedule.medication_id)

            for time_of_day in schedule.times:
                key = make_dose_key(schedule.id, calendar_day, time_of_day)
                scheduled_time = time_to_instant(calendar_day, time_of_day, self.tz)
                status, taken_at = self.resolve_status(key, scheduled_time, calendar_day, now)
                doses.append(
                    GeneratedDose(
                        id=key,
                        schedule_id=schedule.id,
                        medication_id=schedule.medication_id,
                        user_id=user_id,
                        scheduled_time=scheduled_time,
                        status=status,
                        dosage_amount=schedule.dosage_amount,
                        taken_at=taken_at,
                        medication=medication,
                    )
                )

        doses.sort(key=lambda dose: dose.scheduled_time)
        logger.debug("Generated %d doses for %s on %s", len(doses), user_id, day_key(calendar_day))
        return doses

    def resolve_status(
        self,
        key: str,
        scheduled_time: datetime,
        day: date,
        now: datetime,
    ) -> tuple[DoseStatus, datetime | None]:
        """Resolve the status of one dose; an override always wins."""
        override = self.status_lookup.get_status(key)
        if override is not None:
            return override.status, override.taken_at

        if scheduled_time < now:
            if day != now.date():
                return DoseStatus.MISSED, None
            if scheduled_time < now - self.grace_period:
                return DoseStatus.MISSED, None
        return DoseStatus.PENDING, None

    def generate_todays_doses(
        self,
        schedules: Iterable[Schedule],
        medications: Iterable[Medication],
        user_id: str,
    ) -> list[GeneratedDose]:
        """Generate the doses for the current local day."""
        return self.generate_doses_for_date(schedules, medications, self.now(), user_id)

    def generate_week_doses(
        self,
        schedules: Iterable[Schedule],
        medications: Iterable[Medication],
        user_id: str,
        start: date | datetime | None = None,
        days: int | None = None,
    ) -> dict[str, list[GeneratedDose]]:
        """
        Generate doses for consecutive days starting at ``start`` (today by default).

        Returns:
            Doses per ``yyyy-MM-dd`` key, in day order
        """
        schedules = list(schedules)
        medications = list(medications)
        first_day = self.local_date(start)
        days = days or self._settings.WEEK_LENGTH_DAYS

        week: dict[str, list[GeneratedDose]] = {}
        for offset in range(days):
            current = first_day + timedelta(days=offset)
            week[day_key(current)] = self.generate_doses_for_date(
                schedules, medications, current, user_id
            )
        return week
