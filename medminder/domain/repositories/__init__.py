"""
Repository interfaces for the domain layer.
"""

from medminder.domain.repositories.dose_status_repository import DoseStatusRepository
from medminder.domain.repositories.medication_repository import MedicationRepository

__all__ = ["DoseStatusRepository", "MedicationRepository"]
