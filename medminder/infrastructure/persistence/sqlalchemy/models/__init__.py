"""
SQLAlchemy ORM models.
"""

from medminder.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin
from medminder.infrastructure.persistence.sqlalchemy.models.dose_status import DoseStatusModel
from medminder.infrastructure.persistence.sqlalchemy.models.medication import (
    MedicationModel,
    ScheduleModel,
)

__all__ = ["Base", "DoseStatusModel", "MedicationModel", "ScheduleModel", "TimestampMixin"]
