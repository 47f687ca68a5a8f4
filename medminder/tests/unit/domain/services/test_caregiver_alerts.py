"""
Tests for caregiver alert rules.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from medminder.domain.entities.caregiver import CaregiverAlertType, Senior
from medminder.domain.entities.dose import DoseStatus
from medminder.domain.services.caregiver_alerts import (
    days_until_expiry,
    generate_caregiver_alerts,
)
from medminder.tests.helpers.factories import make_dose, make_medication

UTC = ZoneInfo("UTC")
NOW = datetime(2024, 6, 12, 12, 0, tzinfo=UTC)


@pytest.fixture
def senior():
    return Senior(id="user-1", name="Halina")


class TestDaysUntilExpiry:
    @pytest.mark.parametrize(
        ("expiration", "expected"),
        [
            (date(2024, 6, 20), 8),
            (date(2024, 6, 13), 1),
            (date(2024, 6, 12), 0),
            (date(2024, 6, 1), -11),
        ],
    )
    def test_rounds_up(self, expiration, expected):
        medication = make_medication(expiration_date=expiration)

        assert days_until_expiry(medication, NOW) == expected

    def test_no_expiration_date(self):
        assert days_until_expiry(make_medication(), NOW) is None


class TestGenerateCaregiverAlerts:
    def test_overdue_doses(self, senior, test_settings):
        doses = [
            make_dose(datetime(2024, 6, 12, 8, 0, tzinfo=UTC), status=DoseStatus.TAKEN),
            make_dose(datetime(2024, 6, 12, 11, 0, tzinfo=UTC)),
            make_dose(datetime(2024, 6, 12, 11, 45, tzinfo=UTC)),
        ]

        alerts = generate_caregiver_alerts(
            [senior], {senior.id: [make_medication()]}, {senior.id: doses}, NOW, test_settings
        )

        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.type == CaregiverAlertType.MISSED_DOSE
        assert alert.id == "missed-sched-1_2024-06-12_11:00"
        assert alert.message == "Missed dose at 11:00"
        assert alert.medication_name == "Polocard"
        assert alert.senior_name == "Halina"
        assert alert.is_read is False

    def test_stock_alerts(self, senior, test_settings):
        medications = [
            make_medication(id="low", current_quantity=3),
            make_medication(id="enough", current_quantity=5),
            make_medication(id="soon", expiration_date=date(2024, 6, 20)),
            make_medication(id="today", expiration_date=date(2024, 6, 12)),
            make_medication(id="later", expiration_date=date(2024, 8, 1)),
        ]

        alerts = generate_caregiver_alerts(
            [senior], {senior.id: medications}, {}, NOW, test_settings
        )

        by_id = {alert.id: alert for alert in alerts}
        assert set(by_id) == {"low-low", "expiring-soon"}
        assert by_id["low-low"].message == "Only 3 left"
        assert by_id["low-low"].metadata == {"current_quantity": 3}
        assert by_id["expiring-soon"].message == "Expires in 8 days"
        assert by_id["expiring-soon"].type == CaregiverAlertType.EXPIRING

    def test_newest_first(self, senior, test_settings):
        doses = [make_dose(datetime(2024, 6, 12, 9, 0, tzinfo=UTC), status=DoseStatus.MISSED)]
        medications = [make_medication(current_quantity=0)]

        alerts = generate_caregiver_alerts(
            [senior], {senior.id: medications}, {senior.id: doses}, NOW, test_settings
        )

        assert [alert.type for alert in alerts] == [
            CaregiverAlertType.LOW_STOCK,
            CaregiverAlertType.MISSED_DOSE,
        ]

    def test_senior_without_data(self, senior, test_settings):
        assert generate_caregiver_alerts([senior], {}, {}, NOW, test_settings) == []
