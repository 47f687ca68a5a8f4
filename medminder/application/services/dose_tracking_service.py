"""
Dose tracking service.

Application-level flows behind the senior's daily view: loading a day or a
week of doses, and recording taken/skipped actions together with the stock
decrement that follows a taken dose.
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from datetime import date, datetime
from typing import TypeVar

from pydantic import BaseModel, Field

from medminder.application.services.dose_status_store import DoseStatusStore
from medminder.core.config import Settings, get_settings
from medminder.core.utils.date_utils import day_window
from medminder.domain.entities.dose import (
    AdherenceProgress,
    DoseStatus,
    GeneratedDose,
)
from medminder.domain.entities.drug_interaction import DrugInteraction
from medminder.domain.entities.medication import Medication
from medminder.domain.entities.schedule import Schedule
from medminder.domain.exceptions import (
    EntityNotFoundException,
    RepositoryException,
    RepositoryTimeoutException,
)
from medminder.domain.repositories.medication_repository import MedicationRepository
from medminder.domain.services.adherence import calculate_progress
from medminder.domain.services.dose_materializer import DoseMaterializer
from medminder.domain.services.interaction_checker import InteractionChecker, default_checker
from medminder.infrastructure.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class DailyOverview(BaseModel):
    """Everything the daily view needs for one user and one day."""
    day: date
    medications: list[Medication] = Field(default_factory=list)
    schedules: list[Schedule] = Field(default_factory=list)
    doses: list[GeneratedDose] = Field(default_factory=list)
    progress: AdherenceProgress = Field(default_factory=AdherenceProgress)
    interactions: list[DrugInteraction] = Field(default_factory=list)

    @property
    def pending_doses(self) -> list[GeneratedDose]:
        return [dose for dose in self.doses if dose.status == DoseStatus.PENDING]


class DoseActionResult(BaseModel):
    """Outcome of marking a dose as taken."""
    dose: GeneratedDose
    medications: list[Medication]
    quantity_synced: bool = True


class DoseTrackingService:
    """
    Service orchestrating repositories, the status store and the dose engines.

    Repository failures while loading propagate as ``RepositoryException`` and
    are recoverable by the caller (refresh and retry).
    """

    def __init__(
        self,
        medication_repository: MedicationRepository,
        status_store: DoseStatusStore,
        materializer: DoseMaterializer | None = None,
        interaction_checker: InteractionChecker | None = None,
        settings: Settings | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize the service.

        Args:
            medication_repository: Source of medications and schedules
            status_store: Override store shared with the materializer
            materializer: Dose engine, built on ``status_store`` when omitted
            interaction_checker: Interaction engine, the built-in rule table by default
            settings: Settings instance, defaults to ``get_settings()``
            sleep: Awaitable used between quantity sync retries
        """
        self.settings = settings or get_settings()
        self.medication_repository = medication_repository
        self.status_store = status_store
        self.materializer = materializer or DoseMaterializer(
            status_store, clock=status_store.clock, settings=self.settings
        )
        self.interaction_checker = interaction_checker or default_checker
        self._sleep = sleep

    async def _call(self, awaitable: Awaitable[T]) -> T:
        """Await a repository call, bounded by ``REPOSITORY_TIMEOUT_SECONDS`` when set."""
        timeout = self.settings.REPOSITORY_TIMEOUT_SECONDS
        if timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, timeout)
        except asyncio.TimeoutError as e:
            raise RepositoryTimeoutException(f"Repository call exceeded {timeout}s") from e

    async def _preload(self, user_id: str, start: datetime, end: datetime) -> None:
        try:
            await self._call(self.status_store.preload(user_id, start, end))
        except RepositoryTimeoutException as e:
            logger.error(f"Dose status preload timed out: {e}", extra={"user_id": user_id})

    async def _fetch(self, user_id: str) -> tuple[list[Medication], list[Schedule]]:
        # Sequential: one AsyncSession cannot run two statements at once
        medications = await self._call(self.medication_repository.list_medications_by_user(user_id))
        schedules = await self._call(self.medication_repository.list_schedules_by_user(user_id))
        return medications, schedules

    async def load_day(self, user_id: str, day: date | datetime | None = None) -> DailyOverview:
        """
        Load one day of doses for ``user_id`` (today by default).

        Overrides for the day are preloaded before doses are generated.
        """
        calendar_day = self.materializer.local_date(day)
        start, end = day_window(calendar_day, self.materializer.tz)
        await self._preload(user_id, start, end)

        medications, schedules = await self._fetch(user_id)
        doses = self.materializer.generate_doses_for_date(
            schedules, medications, calendar_day, user_id
        )
        return DailyOverview(
            day=calendar_day,
            medications=medications,
            schedules=schedules,
            doses=doses,
            progress=calculate_progress(doses),
            interactions=self.interaction_checker.check_all_interactions(medications),
        )

    async def load_week(
        self, user_id: str, start: date | datetime | None = None
    ) -> dict[str, list[GeneratedDose]]:
        """Load ``WEEK_LENGTH_DAYS`` days of doses starting at ``start`` (today by default)."""
        first_day = self.materializer.local_date(start)
        days = self.settings.WEEK_LENGTH_DAYS
        window_start, window_end = day_window(first_day, self.materializer.tz, days=days)
        await self._preload(user_id, window_start, window_end)

        medications, schedules = await self._fetch(user_id)
        return self.materializer.generate_week_doses(
            schedules, medications, user_id, start=first_day, days=days
        )

    async def take_dose(
        self, dose: GeneratedDose, medications: Sequence[Medication]
    ) -> DoseActionResult:
        """
        Record ``dose`` as taken and decrement the medication's stock.

        The stock change is applied to the returned medication list first and
        then persisted with retries. If persisting keeps failing the local
        value is kept and ``quantity_synced`` is False, so the caller can
        reconcile on its next refresh.
        """
        override = await self.status_store.record_taken(dose)
        taken_dose = dose.model_copy(
            update={"status": DoseStatus.TAKEN, "taken_at": override.taken_at}
        )

        updated = list(medications)
        for index, medication in enumerate(updated):
            if medication.id == dose.medication_id:
                break
        else:
            return DoseActionResult(dose=taken_dose, medications=updated)

        if medication.current_quantity <= 0:
            return DoseActionResult(dose=taken_dose, medications=updated)

        decremented = medication.with_quantity_delta(-1)
        updated[index] = decremented
        synced = await self._sync_quantity(decremented.id, decremented.current_quantity)
        return DoseActionResult(dose=taken_dose, medications=updated, quantity_synced=synced)

    async def skip_dose(self, dose: GeneratedDose) -> GeneratedDose:
        """Record ``dose`` as skipped."""
        await self.status_store.record_skipped(dose)
        return dose.model_copy(update={"status": DoseStatus.SKIPPED, "taken_at": None})

    async def _sync_quantity(self, medication_id: str, quantity: int) -> bool:
        attempts = self.settings.QUANTITY_SYNC_MAX_ATTEMPTS
        for attempt in range(1, attempts + 1):
            try:
                await self._call(
                    self.medication_repository.update_medication_quantity(medication_id, quantity)
                )
                return True
            except EntityNotFoundException as e:
                logger.error(
                    f"Cannot sync quantity, medication is gone: {e}",
                    extra={"medication_id": medication_id},
                )
                return False
            except RepositoryException as e:
                logger.warning(
                    f"Quantity sync attempt {attempt}/{attempts} failed: {e}",
                    extra={"medication_id": medication_id},
                )
                if attempt < attempts:
                    await self._sleep(self.settings.QUANTITY_SYNC_RETRY_DELAY_SECONDS)

        logger.error(
            f"Giving up on quantity sync after {attempts} attempts",
            extra={"medication_id": medication_id, "quantity": quantity},
        )
        return False
