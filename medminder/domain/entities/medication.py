"""
Domain entity for medications.

A medication is a package the user keeps at home: what it is, how much of it
is left and when it expires. Dosing rules live on ``Schedule``.
"""
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MedicationForm(str, Enum):
    """Pharmaceutical forms a medication can come in."""
    TABLET = "tablet"
    CAPSULE = "capsule"
    SYRUP = "syrup"
    DROPS = "drops"
    INJECTION = "injection"
    CREAM = "cream"
    PATCH = "patch"
    INHALER = "inhaler"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class Medication(BaseModel):
    """Domain entity for a medication owned by a user."""
    id: str = Field(default_factory=_new_id)
    user_id: str
    name: str
    active_substance: str = ""
    dosage: str = ""
    form: MedicationForm = MedicationForm.TABLET
    package_size: int = Field(default=0, ge=0)
    current_quantity: int = Field(default=0, ge=0)
    expiration_date: date | None = None
    added_at: datetime = Field(default_factory=_utcnow)
    barcode: str | None = None
    manufacturer: str | None = None
    leaflet_url: str | None = None
    image_url: str | None = None

    model_config = ConfigDict(validate_assignment=True)

    def with_quantity_delta(self, delta: int) -> "Medication":
        """
        Return a copy with ``current_quantity`` moved by ``delta``.

        The package size is not an upper bound; the quantity never goes below 0.
        """
        return self.model_copy(update={"current_quantity": max(0, self.current_quantity + delta)})

    def __str__(self) -> str:
        return f"Medication(id={self.id}, name={self.name})"
