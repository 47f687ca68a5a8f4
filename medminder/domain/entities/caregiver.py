"""
Domain entities for caregiver monitoring.
"""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Senior(BaseModel):
    """A monitored user as seen by a linked caregiver."""
    id: str
    name: str


class CaregiverAlertType(str, Enum):
    """Kinds of alerts raised for a caregiver."""
    MISSED_DOSE = "missed_dose"
    LOW_STOCK = "low_stock"
    EXPIRING = "expiring"

    def __str__(self) -> str:
        return self.value


class CaregiverAlert(BaseModel):
    """An alert about one senior's medication."""
    id: str
    senior_id: str
    senior_name: str
    type: CaregiverAlertType
    medication_id: str | None = None
    medication_name: str | None = None
    message: str
    created_at: datetime
    is_read: bool = False
    metadata: dict[str, int | str] = Field(default_factory=dict)
