"""
Shared fixtures for the test suite.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from medminder.core.config import Settings
from medminder.tests.helpers.factories import FixedClock

UTC = ZoneInfo("UTC")


@pytest.fixture
def tz():
    return UTC


@pytest.fixture
def test_settings() -> Settings:
    """Settings pinned to UTC with no retry delay."""
    return Settings(
        ENVIRONMENT="test",
        TESTING=True,
        TIMEZONE="UTC",
        QUANTITY_SYNC_RETRY_DELAY_SECONDS=0,
    )


@pytest.fixture
def clock() -> FixedClock:
    """Wednesday 2024-06-12, 09:00 UTC."""
    return FixedClock(datetime(2024, 6, 12, 9, 0, tzinfo=UTC))
