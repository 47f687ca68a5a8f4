"""
Dose status store.

Process-lifetime cache of explicit dose status overrides (taken/skipped),
backed by a ``DoseStatusRepository``. The backing repository decides whether
overrides are local (in-memory) or remote; the store logic is the same.

One store instance belongs to one caller. Separate users, or a caregiver
looking at several seniors, get separate stores.
"""

from datetime import datetime, tzinfo

from medminder.core.config import Settings, get_settings
from medminder.core.utils.date_utils import Clock, system_clock
from medminder.domain.entities.dose import (
    DoseStatus,
    DoseStatusOverride,
    DoseStatusRecord,
    GeneratedDose,
)
from medminder.domain.exceptions import RepositoryException
from medminder.domain.repositories.dose_status_repository import DoseStatusRepository
from medminder.infrastructure.logging import get_logger

logger = get_logger(__name__)


class DoseStatusStore:
    """
    In-memory override cache with write-through persistence.

    Persistence failures are logged and swallowed: tracking must keep working
    offline, so a failed read leaves the cache as it was and a failed write
    keeps the cached override.
    """

    def __init__(
        self,
        repository: DoseStatusRepository,
        clock: Clock | None = None,
        tz: tzinfo | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            repository: Persistence collaborator for overrides
            clock: Callable returning "now", used for ``taken_at``
            tz: Wall-clock time zone for the default clock
            settings: Settings instance, defaults to ``get_settings()``
        """
        settings = settings or get_settings()
        self.repository = repository
        self.clock = clock or system_clock(tz or settings.tzinfo)
        self._cache: dict[str, DoseStatusOverride] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def get_status(self, key: str) -> DoseStatusOverride | None:
        """Cached override for a dose identity key, if any."""
        return self._cache.get(key)

    def clear(self) -> None:
        self._cache.clear()

    async def preload(self, user_id: str, range_start: datetime, range_end: datetime) -> int:
        """
        Load the user's overrides whose scheduled time lies in [range_start, range_end].

        Must be awaited before doses in that range are generated, or earlier
        user actions will not be honoured.

        Returns:
            Number of overrides loaded into the cache
        """
        try:
            records = await self.repository.list_overrides_by_user(user_id)
        except RepositoryException as e:
            logger.error(
                f"Failed to preload dose statuses: {e}",
                extra={"user_id": user_id},
            )
            return 0

        loaded = 0
        for key, record in records.items():
            if range_start <= record.scheduled_time <= range_end:
                self._cache[key] = record.to_override()
                loaded += 1

        logger.info(
            f"Loaded {loaded} dose statuses ({len(self._cache)} cached)",
            extra={"user_id": user_id},
        )
        return loaded

    async def record_taken(
        self, dose: GeneratedDose, taken_at: datetime | None = None
    ) -> DoseStatusOverride:
        """Mark ``dose`` as taken now (or at ``taken_at``) and persist it."""
        return await self._record(dose, DoseStatus.TAKEN, taken_at or self.clock())

    async def record_skipped(self, dose: GeneratedDose) -> DoseStatusOverride:
        """Mark ``dose`` as deliberately skipped and persist it."""
        return await self._record(dose, DoseStatus.SKIPPED, None)

    async def _record(
        self, dose: GeneratedDose, status: DoseStatus, taken_at: datetime | None
    ) -> DoseStatusOverride:
        override = DoseStatusOverride(status=status, taken_at=taken_at)
        self._cache[dose.id] = override

        record = DoseStatusRecord.from_dose(dose, status, taken_at, updated_at=self.clock())
        try:
            await self.repository.put_override(dose.id, record)
        except RepositoryException as e:
            logger.error(
                f"Failed to persist dose status {status}: {e}",
                extra={"dose_id": dose.id, "user_id": dose.user_id},
            )
        else:
            logger.debug(f"Saved dose status {status}", extra={"dose_id": dose.id})
        return override
