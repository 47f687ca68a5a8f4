"""
Tests for the dose status store.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from zoneinfo import ZoneInfo

import pytest

from medminder.application.services.dose_status_store import DoseStatusStore
from medminder.domain.entities.dose import DoseStatus, DoseStatusRecord
from medminder.domain.exceptions import DatabaseConnectionException
from medminder.infrastructure.repositories.memory import InMemoryDoseStatusRepository
from medminder.tests.helpers.factories import make_dose

UTC = ZoneInfo("UTC")
DAY_START = datetime(2024, 6, 12, 0, 0, tzinfo=UTC)
DAY_END = datetime(2024, 6, 13, 0, 0, tzinfo=UTC)


def _record(scheduled_time, status=DoseStatus.TAKEN, user_id="user-1"):
    dose = make_dose(scheduled_time, user_id=user_id)
    taken_at = scheduled_time if status == DoseStatus.TAKEN else None
    return DoseStatusRecord.from_dose(dose, status, taken_at)


@pytest.fixture
def repository():
    return InMemoryDoseStatusRepository()


@pytest.fixture
def store(repository, clock, test_settings):
    return DoseStatusStore(repository, clock=clock, settings=test_settings)


@pytest.fixture
def failing_repository():
    repository = MagicMock()
    repository.list_overrides_by_user = AsyncMock(
        side_effect=DatabaseConnectionException("connection refused")
    )
    repository.put_override = AsyncMock(side_effect=DatabaseConnectionException("read-only"))
    return repository


class TestPreload:
    @pytest.mark.asyncio
    async def test_only_records_in_range_are_cached(self, store, repository):
        inside = _record(datetime(2024, 6, 12, 8, 0, tzinfo=UTC))
        boundary = _record(datetime(2024, 6, 13, 0, 0, tzinfo=UTC), DoseStatus.SKIPPED)
        outside = _record(datetime(2024, 6, 11, 8, 0, tzinfo=UTC))
        other_user = _record(datetime(2024, 6, 12, 9, 0, tzinfo=UTC), user_id="user-2")
        for record in (inside, boundary, outside, other_user):
            await repository.put_override(record.key, record)

        loaded = await store.preload("user-1", DAY_START, DAY_END)

        assert loaded == 2
        assert inside.key in store
        assert store.get_status(boundary.key).status == DoseStatus.SKIPPED
        assert outside.key not in store
        assert other_user.key not in store

    @pytest.mark.asyncio
    async def test_preload_merges_into_cache(self, store, repository):
        dose = make_dose(datetime(2024, 6, 11, 8, 0, tzinfo=UTC))
        await store.record_skipped(dose)
        record = _record(datetime(2024, 6, 12, 8, 0, tzinfo=UTC))
        await repository.put_override(record.key, record)

        await store.preload("user-1", DAY_START, DAY_END)

        assert len(store) == 2
        assert dose.id in store

    @pytest.mark.asyncio
    async def test_read_failure_is_swallowed(self, failing_repository, clock, test_settings):
        store = DoseStatusStore(failing_repository, clock=clock, settings=test_settings)

        loaded = await store.preload("user-1", DAY_START, DAY_END)

        assert loaded == 0
        assert len(store) == 0
        failing_repository.list_overrides_by_user.assert_awaited_once_with("user-1")


class TestRecord:
    @pytest.mark.asyncio
    async def test_record_taken_uses_clock_and_persists(self, store, repository, clock):
        dose = make_dose(datetime(2024, 6, 12, 8, 0, tzinfo=UTC))

        override = await store.record_taken(dose)

        assert override.status == DoseStatus.TAKEN
        assert override.taken_at == clock.now
        persisted = await repository.list_overrides_by_user("user-1")
        assert persisted[dose.id].status == DoseStatus.TAKEN
        assert persisted[dose.id].scheduled_time == dose.scheduled_time
        assert persisted[dose.id].updated_at == clock.now

    @pytest.mark.asyncio
    async def test_record_skipped_replaces_taken(self, store, repository):
        dose = make_dose(datetime(2024, 6, 12, 8, 0, tzinfo=UTC))

        await store.record_taken(dose)
        await store.record_skipped(dose)

        assert store.get_status(dose.id).status == DoseStatus.SKIPPED
        assert store.get_status(dose.id).taken_at is None
        assert len(repository) == 1

    @pytest.mark.asyncio
    async def test_write_failure_keeps_cached_override(
        self, failing_repository, clock, test_settings
    ):
        store = DoseStatusStore(failing_repository, clock=clock, settings=test_settings)
        dose = make_dose(datetime(2024, 6, 12, 8, 0, tzinfo=UTC))

        override = await store.record_taken(dose)

        assert override.status == DoseStatus.TAKEN
        assert store.get_status(dose.id) == override
        failing_repository.put_override.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_clear(self, store):
        await store.record_skipped(make_dose(datetime(2024, 6, 12, 8, 0, tzinfo=UTC)))

        store.clear()

        assert len(store) == 0
