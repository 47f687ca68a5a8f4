"""
In-Memory Dose Status Repository Module.
"""

from medminder.domain.entities.dose import DoseStatusRecord
from medminder.domain.repositories.dose_status_repository import DoseStatusRepository


class InMemoryDoseStatusRepository(DoseStatusRepository):
    """Dictionary-backed override storage keyed by dose identity key."""

    def __init__(self) -> None:
        self._records: dict[str, DoseStatusRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    async def list_overrides_by_user(self, user_id: str) -> dict[str, DoseStatusRecord]:
        return {
            key: record.model_copy()
            for key, record in self._records.items()
            if record.user_id == user_id
        }

    async def put_override(self, key: str, record: DoseStatusRecord) -> None:
        self._records[key] = record.model_copy(update={"key": key})
