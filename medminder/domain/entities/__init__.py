"""
Domain entities package.
"""

from medminder.domain.entities.caregiver import CaregiverAlert, CaregiverAlertType, Senior
from medminder.domain.entities.dose import (
    UNKNOWN_MEDICATION_NAME,
    AdherenceProgress,
    DoseStatus,
    DoseStatusOverride,
    DoseStatusRecord,
    GeneratedDose,
    make_dose_key,
)
from medminder.domain.entities.drug_interaction import (
    DrugInteraction,
    HasActiveSubstance,
    InteractionCheckResult,
    InteractionSeverity,
    SubstanceRef,
)
from medminder.domain.entities.medication import Medication, MedicationForm
from medminder.domain.entities.schedule import Schedule

__all__ = [
    "UNKNOWN_MEDICATION_NAME",
    "AdherenceProgress",
    "CaregiverAlert",
    "CaregiverAlertType",
    "DoseStatus",
    "DoseStatusOverride",
    "DoseStatusRecord",
    "DrugInteraction",
    "GeneratedDose",
    "HasActiveSubstance",
    "InteractionCheckResult",
    "InteractionSeverity",
    "Medication",
    "MedicationForm",
    "Schedule",
    "Senior",
    "SubstanceRef",
    "make_dose_key",
]
