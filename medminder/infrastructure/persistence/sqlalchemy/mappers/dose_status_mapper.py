"""
Mapper functions for dose status records.
"""

from datetime import datetime

from medminder.core.utils.date_utils import as_utc
from medminder.domain.entities.dose import DoseStatus, DoseStatusRecord
from medminder.infrastructure.persistence.sqlalchemy.models.dose_status import DoseStatusModel


def _optional_utc(value: datetime | None) -> datetime | None:
    return as_utc(value) if value is not None else None


def map_dose_status_record_to_model(key: str, record: DoseStatusRecord) -> DoseStatusModel:
    """
    Map a DoseStatusRecord to its database row, stored under ``key``.

    All instants are written as UTC.
    """
    return DoseStatusModel(
        key=key,
        user_id=record.user_id,
        schedule_id=record.schedule_id,
        medication_id=record.medication_id,
        scheduled_time=as_utc(record.scheduled_time),
        status=record.status.value,
        taken_at=_optional_utc(record.taken_at),
        updated_at=_optional_utc(record.updated_at),
    )


def map_dose_status_model_to_record(model: DoseStatusModel) -> DoseStatusRecord:
    return DoseStatusRecord(
        key=model.key,
        user_id=model.user_id,
        schedule_id=model.schedule_id,
        medication_id=model.medication_id,
        scheduled_time=as_utc(model.scheduled_time),
        status=DoseStatus(model.status),
        taken_at=_optional_utc(model.taken_at),
        updated_at=_optional_utc(model.updated_at),
    )
