"""
Test data builders shared across the test suite.
"""

from datetime import date, datetime, timezone

from medminder.domain.entities.dose import DoseStatus, GeneratedDose, make_dose_key
from medminder.domain.entities.medication import Medication
from medminder.domain.entities.schedule import Schedule

USER_ID = "user-1"


class FixedClock:
    """Settable clock callable."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_medication(**overrides) -> Medication:
    data = {
        "id": "med-1",
        "user_id": USER_ID,
        "name": "Polocard",
        "active_substance": "kwas acetylosalicylowy",
        "dosage": "75 mg",
        "package_size": 60,
        "current_quantity": 10,
        "added_at": datetime(2024, 6, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Medication(**data)


def make_schedule(**overrides) -> Schedule:
    data = {
        "id": "sched-1",
        "medication_id": "med-1",
        "user_id": USER_ID,
        "times": ["08:00", "20:00"],
        "dosage_amount": "1 tabletka",
        "start_date": date(2024, 6, 1),
    }
    data.update(overrides)
    return Schedule(**data)


def make_dose(
    scheduled_time: datetime,
    status: DoseStatus = DoseStatus.PENDING,
    schedule_id: str = "sched-1",
    medication_id: str = "med-1",
    user_id: str = USER_ID,
) -> GeneratedDose:
    return GeneratedDose(
        id=make_dose_key(schedule_id, scheduled_time, f"{scheduled_time:%H:%M}"),
        schedule_id=schedule_id,
        medication_id=medication_id,
        user_id=user_id,
        scheduled_time=scheduled_time,
        status=status,
    )
