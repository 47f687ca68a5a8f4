"""
SQLAlchemy repository implementations.
"""

from medminder.infrastructure.persistence.sqlalchemy.repositories.dose_status_repository import (
    SQLAlchemyDoseStatusRepository,
)
from medminder.infrastructure.persistence.sqlalchemy.repositories.medication_repository import (
    SQLAlchemyMedicationRepository,
)

__all__ = ["SQLAlchemyDoseStatusRepository", "SQLAlchemyMedicationRepository"]
