"""
Domain entities for generated doses and their status overrides.

A ``GeneratedDose`` is never persisted as such. Its identity is the
``{schedule_id}_{yyyy-MM-dd}_{HH:mm}`` key, which lets a persisted
``DoseStatusOverride`` be matched to the same occurrence every time the dose
is regenerated.
"""
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from medminder.core.utils.date_utils import day_key
from medminder.domain.entities.medication import Medication

UNKNOWN_MEDICATION_NAME = "Unknown medication"


class DoseStatus(str, Enum):
    """Status of a single dose occurrence."""
    PENDING = "pending"
    TAKEN = "taken"
    MISSED = "missed"
    SKIPPED = "skipped"

    def __str__(self) -> str:
        return self.value

    @property
    def is_recordable(self) -> bool:
        """Only explicit user actions are ever persisted."""
        return self in (DoseStatus.TAKEN, DoseStatus.SKIPPED)


def make_dose_key(schedule_id: str, day: date | datetime, time_of_day: str) -> str:
    """Identity key of the dose of ``schedule_id`` on ``day`` at ``time_of_day``."""
    return f"{schedule_id}_{day_key(day)}_{time_of_day}"


class GeneratedDose(BaseModel):
    """A derived occurrence of a schedule at a specific date and time."""
    id: str
    schedule_id: str
    medication_id: str
    user_id: str
    scheduled_time: datetime
    status: DoseStatus = DoseStatus.PENDING
    dosage_amount: str = ""
    taken_at: datetime | None = None
    medication: Medication | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def medication_name(self) -> str:
        """Name to display; a dangling medication reference is not an error."""
        return self.medication.name if self.medication else UNKNOWN_MEDICATION_NAME


class DoseStatusOverride(BaseModel):
    """Cached explicit status of a dose: taken (with a time) or skipped."""
    status: DoseStatus
    taken_at: datetime | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_status(self) -> "DoseStatusOverride":
        if not self.status.is_recordable:
            raise ValueError(f"Status {self.status} is inferred and cannot be recorded")
        return self


class DoseStatusRecord(BaseModel):
    """Persisted form of a dose status override, keyed by the dose identity key."""
    key: str
    user_id: str
    schedule_id: str
    medication_id: str
    scheduled_time: datetime
    status: DoseStatus
    taken_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="after")
    def validate_status(self) -> "DoseStatusRecord":
        if not self.status.is_recordable:
            raise ValueError(f"Status {self.status} is inferred and cannot be recorded")
        return self

    @classmethod
    def from_dose(
        cls,
        dose: GeneratedDose,
        status: DoseStatus,
        taken_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "DoseStatusRecord":
        """Build the record persisted when the user acts on ``dose``."""
        return cls(
            key=dose.id,
            user_id=dose.user_id,
            schedule_id=dose.schedule_id,
            medication_id=dose.medication_id,
            scheduled_time=dose.scheduled_time,
            status=status,
            taken_at=taken_at,
            updated_at=updated_at,
        )

    def to_override(self) -> DoseStatusOverride:
        return DoseStatusOverride(status=self.status, taken_at=self.taken_at)


class AdherenceProgress(BaseModel):
    """Status counts and taken percentage over a set of doses."""
    total: int = Field(default=0, ge=0)
    taken: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)
    missed: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    percentage: int = Field(default=0, ge=0, le=100)
