"""
Adherence aggregation over generated doses.
"""

from collections import Counter
from collections.abc import Iterable

from medminder.domain.entities.dose import AdherenceProgress, DoseStatus, GeneratedDose


def taken_percentage(taken: int, total: int) -> int:
    """``taken / total`` as a whole percentage, halves rounded up; 0 when empty."""
    if total <= 0:
        return 0
    return (200 * taken + total) // (2 * total)


def calculate_progress(doses: Iterable[GeneratedDose]) -> AdherenceProgress:
    """Count doses per status and compute the taken percentage."""
    counts = Counter(dose.status for dose in doses)
    total = sum(counts.values())
    return AdherenceProgress(
        total=total,
        taken=counts[DoseStatus.TAKEN],
        pending=counts[DoseStatus.PENDING],
        missed=counts[DoseStatus.MISSED],
        skipped=counts[DoseStatus.SKIPPED],
        percentage=taken_percentage(counts[DoseStatus.TAKEN], total),
    )
