"""
Caregiver alert rules.

Derives alerts for linked seniors from their generated doses and medication
stock: overdue doses, low stock and upcoming expiry.
"""

import math
from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta

from medminder.core.config import Settings, get_settings
from medminder.core.utils.date_utils import start_of_day
from medminder.domain.entities.caregiver import CaregiverAlert, CaregiverAlertType, Senior
from medminder.domain.entities.dose import UNKNOWN_MEDICATION_NAME, DoseStatus, GeneratedDose
from medminder.domain.entities.medication import Medication

_UNRESOLVED_STATUSES = (DoseStatus.PENDING, DoseStatus.MISSED)


def days_until_expiry(medication: Medication, now: datetime) -> int | None:
    """Whole days, rounded up, from ``now`` to the start of the expiration date."""
    if medication.expiration_date is None:
        return None
    expires_at = start_of_day(medication.expiration_date, now.tzinfo)
    return math.ceil((expires_at - now) / timedelta(days=1))


def missed_dose_alerts(
    senior: Senior,
    doses: Sequence[GeneratedDose],
    medications: Sequence[Medication],
    now: datetime,
    overdue_after: timedelta,
) -> list[CaregiverAlert]:
    medications_by_id = {medication.id: medication for medication in medications}
    alerts = []
    for dose in doses:
        if dose.status not in _UNRESOLVED_STATUSES:
            continue
        if now - dose.scheduled_time <= overdue_after:
            continue
        medication = medications_by_id.get(dose.medication_id)
        alerts.append(
            CaregiverAlert(
                id=f"missed-{dose.id}",
                senior_id=senior.id,
                senior_name=senior.name,
                type=CaregiverAlertType.MISSED_DOSE,
                medication_id=dose.medication_id,
                medication_name=medication.name if medication else UNKNOWN_MEDICATION_NAME,
                message=f"Missed dose at {dose.scheduled_time:%H:%M}",
                created_at=dose.scheduled_time,
            )
        )
    return alerts


def stock_alerts(
    senior: Senior,
    medications: Sequence[Medication],
    now: datetime,
    low_stock_threshold: int,
    expiry_warning_days: int,
) -> list[CaregiverAlert]:
    alerts = []
    for medication in medications:
        if medication.current_quantity < low_stock_threshold:
            alerts.append(
                CaregiverAlert(
                    id=f"low-{medication.id}",
                    senior_id=senior.id,
                    senior_name=senior.name,
                    type=CaregiverAlertType.LOW_STOCK,
                    medication_id=medication.id,
                    medication_name=medication.name,
                    message=f"Only {medication.current_quantity} left",
                    created_at=now,
                    metadata={"current_quantity": medication.current_quantity},
                )
            )

    for medication in medications:
        days_left = days_until_expiry(medication, now)
        if days_left is not None and 0 < days_left <= expiry_warning_days:
            alerts.append(
                CaregiverAlert(
                    id=f"expiring-{medication.id}",
                    senior_id=senior.id,
                    senior_name=senior.name,
                    type=CaregiverAlertType.EXPIRING,
                    medication_id=medication.id,
                    medication_name=medication.name,
                    message=f"Expires in {days_left} days",
                    created_at=now,
                    metadata={"days_until_expiry": days_left},
                )
            )
    return alerts


def generate_caregiver_alerts(
    seniors: Sequence[Senior],
    medications_by_senior: Mapping[str, Sequence[Medication]],
    doses_by_senior: Mapping[str, Sequence[GeneratedDose]],
    now: datetime,
    settings: Settings | None = None,
) -> list[CaregiverAlert]:
    """
    Build the alert list for a caregiver's seniors.

    Args:
        seniors: Seniors linked to the caregiver
        medications_by_senior: Medications per senior ID
        doses_by_senior: Generated doses per senior ID
        now: Current wall-clock time (timezone-aware)
        settings: Thresholds, defaults to ``get_settings()``

    Returns:
        Alerts, newest first
    """
    settings = settings or get_settings()
    overdue_after = timedelta(minutes=settings.CAREGIVER_OVERDUE_ALERT_MINUTES)

    alerts: list[CaregiverAlert] = []
    for senior in seniors:
        medications = medications_by_senior.get(senior.id, [])
        doses = doses_by_senior.get(senior.id, [])
        alerts.extend(missed_dose_alerts(senior, doses, medications, now, overdue_after))
        alerts.extend(
            stock_alerts(
                senior,
                medications,
                now,
                settings.LOW_STOCK_THRESHOLD,
                settings.EXPIRY_WARNING_DAYS,
            )
        )

    return sorted(alerts, key=lambda alert: alert.created_at, reverse=True)
