"""
Caregiver monitoring service.

Lets a caregiver look at the current day of each linked senior and collects
the alerts raised for them. Each senior is materialized with a dedicated
status store so overrides never leak between users.
"""

from datetime import datetime, tzinfo

from pydantic import BaseModel, Field

from medminder.application.services.dose_status_store import DoseStatusStore
from medminder.core.config import Settings, get_settings
from medminder.core.utils.date_utils import Clock, day_window, system_clock
from medminder.domain.entities.caregiver import CaregiverAlert, Senior
from medminder.domain.entities.dose import AdherenceProgress, GeneratedDose
from medminder.domain.entities.medication import Medication
from medminder.domain.exceptions import RepositoryException
from medminder.domain.repositories.dose_status_repository import DoseStatusRepository
from medminder.domain.repositories.medication_repository import MedicationRepository
from medminder.domain.services.adherence import calculate_progress
from medminder.domain.services.caregiver_alerts import generate_caregiver_alerts
from medminder.domain.services.dose_materializer import DoseMaterializer
from medminder.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SeniorOverview(BaseModel):
    """A senior's medications and today's doses as seen by a caregiver."""
    senior: Senior
    medications: list[Medication] = Field(default_factory=list)
    doses: list[GeneratedDose] = Field(default_factory=list)
    progress: AdherenceProgress = Field(default_factory=AdherenceProgress)


class CaregiverMonitoringService:
    """Read-only monitoring of linked seniors."""

    def __init__(
        self,
        medication_repository: MedicationRepository,
        status_repository: DoseStatusRepository,
        clock: Clock | None = None,
        tz: tzinfo | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.medication_repository = medication_repository
        self.status_repository = status_repository
        self.tz = tz or self.settings.tzinfo
        self.clock = clock or system_clock(self.tz)

    def now(self) -> datetime:
        return self.clock().astimezone(self.tz)

    async def senior_overview(self, senior: Senior) -> SeniorOverview:
        """
        Load today's doses and progress for one senior.

        Raises:
            RepositoryException: If medications or schedules cannot be fetched
        """
        store = DoseStatusStore(self.status_repository, clock=self.clock, settings=self.settings)
        materializer = DoseMaterializer(
            store, tz=self.tz, clock=self.clock, settings=self.settings
        )
        now = self.now()
        start, end = day_window(now, self.tz)
        await store.preload(senior.id, start, end)

        medications = await self.medication_repository.list_medications_by_user(senior.id)
        schedules = await self.medication_repository.list_schedules_by_user(senior.id)
        doses = materializer.generate_doses_for_date(schedules, medications, now, senior.id)
        return SeniorOverview(
            senior=senior,
            medications=medications,
            doses=doses,
            progress=calculate_progress(doses),
        )

    async def collect_alerts(self, seniors: list[Senior]) -> list[CaregiverAlert]:
        """
        Collect alerts for all ``seniors``, newest first.

        A senior whose data cannot be loaded is logged and left out.
        """
        medications_by_senior: dict[str, list[Medication]] = {}
        doses_by_senior: dict[str, list[GeneratedDose]] = {}

        for senior in seniors:
            try:
                overview = await self.senior_overview(senior)
            except RepositoryException as e:
                logger.error(
                    f"Skipping senior in alert collection: {e}",
                    extra={"senior_id": senior.id},
                )
                continue
            medications_by_senior[senior.id] = overview.medications
            doses_by_senior[senior.id] = overview.doses

        alerts = generate_caregiver_alerts(
            seniors, medications_by_senior, doses_by_senior, self.now(), self.settings
        )
        logger.info(f"Collected {len(alerts)} alerts for {len(seniors)} seniors")
        return alerts
