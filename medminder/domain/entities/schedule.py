"""
Domain entity for dosing schedules.

A schedule is a recurring rule: a set of times of day, an optional set of
weekdays and a date range. Doses are never stored per day; they are derived
from these rules on demand.
"""
import re
from datetime import date
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def _new_id() -> str:
    return str(uuid4())


class Schedule(BaseModel):
    """
    Domain entity for a recurring dosing schedule.

    ``days_of_week`` uses 1=Monday .. 7=Sunday; an empty list means every day.
    ``end_date`` is an inclusive upper bound.
    """
    id: str = Field(default_factory=_new_id)
    medication_id: str
    user_id: str
    times: list[str]
    days_of_week: list[int] = Field(default_factory=list)
    dosage_amount: str = ""
    start_date: date
    end_date: date | None = None
    reminder_minutes_before: int = Field(default=0, ge=0)
    is_active: bool = True

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("times")
    @classmethod
    def validate_times(cls, v: list[str]) -> list[str]:
        """Require at least one well-formed ``HH:mm`` time; dedupe and sort."""
        if not v:
            raise ValueError("A schedule needs at least one time of day")
        for value in v:
            if not _TIME_PATTERN.match(value):
                raise ValueError(f"Invalid time of day (expected HH:mm): {value!r}")
        return sorted(set(v))

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, v: list[int]) -> list[int]:
        """Weekdays must be 1..7; dedupe and sort."""
        for day in v:
            if not 1 <= day <= 7:
                raise ValueError(f"Day of week must be between 1 and 7, got {day}")
        return sorted(set(v))

    @model_validator(mode="after")
    def validate_date_range(self) -> "Schedule":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self
