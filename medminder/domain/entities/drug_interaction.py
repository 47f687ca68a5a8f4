"""
Domain entities for drug-interaction detection.
"""
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class InteractionSeverity(str, Enum):
    """Severity of a drug interaction, ordered low < medium < high < critical."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    def __str__(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return list(InteractionSeverity).index(self)

    # Plain str comparison would order alphabetically
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, InteractionSeverity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, InteractionSeverity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, InteractionSeverity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, InteractionSeverity):
            return NotImplemented
        return self.rank >= other.rank


class HasActiveSubstance(Protocol):
    """Anything exposing an ``active_substance`` text, e.g. ``Medication``."""
    active_substance: str


class SubstanceRef(BaseModel):
    """Minimal medication stand-in for checks run before a medication is saved."""
    active_substance: str


class DrugInteraction(BaseModel):
    """A static rule pairing two substances with a severity and guidance."""
    id: str
    substance1: str
    substance2: str
    severity: InteractionSeverity
    description: str
    recommendation: str

    model_config = ConfigDict(frozen=True)


class InteractionCheckResult(BaseModel):
    """Outcome of checking one medication against a set of others."""
    has_interaction: bool = False
    interactions: list[DrugInteraction] = Field(default_factory=list)
    highest_severity: InteractionSeverity | None = None
