"""
In-memory repository implementations.

Local strategy for the repository contracts: useful for tests, development,
and offline use where a persistent store is not required.
"""

from medminder.infrastructure.repositories.memory.dose_status_repository import (
    InMemoryDoseStatusRepository,
)
from medminder.infrastructure.repositories.memory.medication_repository import (
    InMemoryMedicationRepository,
)

__all__ = ["InMemoryDoseStatusRepository", "InMemoryMedicationRepository"]
