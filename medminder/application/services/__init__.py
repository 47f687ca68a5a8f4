"""
Application services.
"""

from medminder.application.services.caregiver_monitoring_service import (
    CaregiverMonitoringService,
    SeniorOverview,
)
from medminder.application.services.dose_status_store import DoseStatusStore
from medminder.application.services.dose_tracking_service import (
    DailyOverview,
    DoseActionResult,
    DoseTrackingService,
)

__all__ = [
    "CaregiverMonitoringService",
    "DailyOverview",
    "DoseActionResult",
    "DoseStatusStore",
    "DoseTrackingService",
    "SeniorOverview",
]
