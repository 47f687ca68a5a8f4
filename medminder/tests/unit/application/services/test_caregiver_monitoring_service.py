"""
Tests for the caregiver monitoring service.
"""

import pytest

from medminder.application.services.caregiver_monitoring_service import (
    CaregiverMonitoringService,
)
from medminder.application.services.dose_status_store import DoseStatusStore
from medminder.domain.entities.caregiver import CaregiverAlertType, Senior
from medminder.domain.entities.dose import DoseStatus
from medminder.domain.exceptions import DatabaseConnectionException
from medminder.infrastructure.repositories.memory import (
    InMemoryDoseStatusRepository,
    InMemoryMedicationRepository,
)
from medminder.tests.helpers.factories import make_medication, make_schedule

HALINA = Senior(id="senior-1", name="Halina")
JERZY = Senior(id="senior-2", name="Jerzy")


class PartiallyBrokenRepository(InMemoryMedicationRepository):
    """Fails for one user only."""

    def __init__(self, broken_user_id, **kwargs):
        super().__init__(**kwargs)
        self.broken_user_id = broken_user_id

    async def list_medications_by_user(self, user_id):
        if user_id == self.broken_user_id:
            raise DatabaseConnectionException("timeout")
        return await super().list_medications_by_user(user_id)


def _seed():
    return {
        "medications": [
            make_medication(id="h-med", user_id=HALINA.id, current_quantity=20),
            make_medication(id="j-med", user_id=JERZY.id, name="Metformax", current_quantity=2),
        ],
        "schedules": [
            make_schedule(
                id="h-sched", medication_id="h-med", user_id=HALINA.id, times=["07:00", "21:00"]
            ),
            make_schedule(id="j-sched", medication_id="j-med", user_id=JERZY.id, times=["22:00"]),
        ],
    }


@pytest.fixture
def status_repository():
    return InMemoryDoseStatusRepository()


@pytest.fixture
def service(status_repository, clock, tz, test_settings):
    return CaregiverMonitoringService(
        InMemoryMedicationRepository(**_seed()),
        status_repository,
        clock=clock,
        tz=tz,
        settings=test_settings,
    )


@pytest.mark.asyncio
async def test_senior_overview(service):
    overview = await service.senior_overview(HALINA)

    assert overview.senior == HALINA
    assert [dose.id for dose in overview.doses] == [
        "h-sched_2024-06-12_07:00",
        "h-sched_2024-06-12_21:00",
    ]
    assert all(dose.user_id == HALINA.id for dose in overview.doses)
    assert overview.progress.total == 2


@pytest.mark.asyncio
async def test_overview_honours_senior_actions(service, status_repository, clock, test_settings):
    senior_store = DoseStatusStore(status_repository, clock=clock, settings=test_settings)
    first = (await service.senior_overview(HALINA)).doses[0]
    await senior_store.record_taken(first)

    overview = await service.senior_overview(HALINA)

    assert overview.doses[0].status == DoseStatus.TAKEN
    assert overview.progress.percentage == 50


@pytest.mark.asyncio
async def test_collect_alerts(service):
    alerts = await service.collect_alerts([HALINA, JERZY])

    # 07:00 is two hours overdue at 09:00; Jerzy is low on stock
    assert [(alert.senior_id, alert.type) for alert in alerts] == [
        (JERZY.id, CaregiverAlertType.LOW_STOCK),
        (HALINA.id, CaregiverAlertType.MISSED_DOSE),
    ]
    assert alerts[0].message == "Only 2 left"


@pytest.mark.asyncio
async def test_unreachable_senior_is_skipped(status_repository, clock, tz, test_settings):
    service = CaregiverMonitoringService(
        PartiallyBrokenRepository(HALINA.id, **_seed()),
        status_repository,
        clock=clock,
        tz=tz,
        settings=test_settings,
    )

    alerts = await service.collect_alerts([HALINA, JERZY])

    assert [alert.senior_id for alert in alerts] == [JERZY.id]
