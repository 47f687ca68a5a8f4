"""
Mapper functions for translating between Medication/Schedule domain entities
and SQLAlchemy models.
"""

from medminder.core.utils.date_utils import as_utc
from medminder.domain.entities.medication import Medication, MedicationForm
from medminder.domain.entities.schedule import Schedule
from medminder.infrastructure.persistence.sqlalchemy.models.medication import (
    MedicationModel,
    ScheduleModel,
)


def map_medication_entity_to_model(medication: Medication) -> MedicationModel:
    """
    Map a Medication domain entity to a MedicationModel database model.

    Args:
        medication: The domain entity to map

    Returns:
        The corresponding database model
    """
    return MedicationModel(
        id=medication.id,
        user_id=medication.user_id,
        name=medication.name,
        active_substance=medication.active_substance,
        dosage=medication.dosage,
        form=medication.form.value,
        package_size=medication.package_size,
        current_quantity=medication.current_quantity,
        expiration_date=medication.expiration_date,
        added_at=as_utc(medication.added_at),
        barcode=medication.barcode,
        manufacturer=medication.manufacturer,
        leaflet_url=medication.leaflet_url,
        image_url=medication.image_url,
    )


def map_medication_model_to_entity(model: MedicationModel) -> Medication:
    """
    Map a MedicationModel database model to a Medication domain entity.

    SQLite hands datetimes back naive; they were written as UTC.
    """
    return Medication(
        id=model.id,
        user_id=model.user_id,
        name=model.name,
        active_substance=model.active_substance or "",
        dosage=model.dosage or "",
        form=MedicationForm(model.form),
        package_size=model.package_size,
        current_quantity=model.current_quantity,
        expiration_date=model.expiration_date,
        added_at=as_utc(model.added_at),
        barcode=model.barcode,
        manufacturer=model.manufacturer,
        leaflet_url=model.leaflet_url,
        image_url=model.image_url,
    )


def map_schedule_entity_to_model(schedule: Schedule) -> ScheduleModel:
    return ScheduleModel(
        id=schedule.id,
        medication_id=schedule.medication_id,
        user_id=schedule.user_id,
        times=list(schedule.times),
        days_of_week=list(schedule.days_of_week),
        dosage_amount=schedule.dosage_amount,
        start_date=schedule.start_date,
        end_date=schedule.end_date,
        reminder_minutes_before=schedule.reminder_minutes_before,
        is_active=schedule.is_active,
    )


def map_schedule_model_to_entity(model: ScheduleModel) -> Schedule:
    return Schedule(
        id=model.id,
        medication_id=model.medication_id,
        user_id=model.user_id,
        times=list(model.times),
        days_of_week=list(model.days_of_week or []),
        dosage_amount=model.dosage_amount or "",
        start_date=model.start_date,
        end_date=model.end_date,
        reminder_minutes_before=model.reminder_minutes_before,
        is_active=model.is_active,
    )
