"""
Drug-interaction matching engine.

Active-substance fields are free text and often list several substances
("Paracetamol, Kofeina"). Two names match when, after normalization, they are
equal or one contains the other. This lets a single-substance rule match
inside a compound field, at the price of occasional over-matching on short
or blank names.
"""

import logging
import unicodedata
from collections.abc import Sequence

from medminder.domain.entities.drug_interaction import (
    DrugInteraction,
    HasActiveSubstance,
    InteractionCheckResult,
    InteractionSeverity,
)
from medminder.domain.services.interaction_rules import DRUG_INTERACTIONS

logger = logging.getLogger(__name__)


def normalize_substance(substance: str) -> str:
    """Lowercase, strip combining diacritics (U+0300..U+036F) and trim."""
    decomposed = unicodedata.normalize("NFD", substance.lower())
    stripped = "".join(ch for ch in decomposed if not "\u0300" <= ch <= "\u036f")
    return stripped.strip()


def substances_match(first: str, second: str) -> bool:
    """
    Equal or substring-contained after normalization.

    A blank name is contained in every name, so it matches anything.
    """
    a = normalize_substance(first)
    b = normalize_substance(second)
    return a == b or b in a or a in b


class InteractionChecker:
    """
    Matches medications against a pairwise interaction rule table.
    """

    def __init__(self, rules: Sequence[DrugInteraction] = DRUG_INTERACTIONS) -> None:
        self.rules = tuple(rules)
        self._normalized_rules = [
            (rule, normalize_substance(rule.substance1), normalize_substance(rule.substance2))
            for rule in self.rules
        ]

    def check_interactions(
        self,
        candidate: HasActiveSubstance,
        existing: Sequence[HasActiveSubstance],
    ) -> InteractionCheckResult:
        """
        Find the rules triggered by adding ``candidate`` to ``existing``.

        A rule fires when the candidate matches one of its substances and an
        existing medication matches the other, in either order. Each rule is
        reported once, in discovery order.
        """
        found: dict[str, DrugInteraction] = {}
        candidate_substance = normalize_substance(candidate.active_substance)

        for other in existing:
            other_substance = normalize_substance(other.active_substance)
            for rule, first, second in self._normalized_rules:
                if rule.id in found:
                    continue
                if (
                    substances_match(candidate_substance, first)
                    and substances_match(other_substance, second)
                ) or (
                    substances_match(candidate_substance, second)
                    and substances_match(other_substance, first)
                ):
                    found[rule.id] = rule

        interactions = list(found.values())
        return InteractionCheckResult(
            has_interaction=bool(interactions),
            interactions=interactions,
            highest_severity=highest_severity(interactions),
        )

    def check_all_interactions(
        self, medications: Sequence[HasActiveSubstance]
    ) -> list[DrugInteraction]:
        """Check every unordered pair of ``medications``; each rule is reported once."""
        found: dict[str, DrugInteraction] = {}
        for i, first in enumerate(medications):
            for second in medications[i + 1:]:
                for rule in self.check_interactions(first, [second]).interactions:
                    found.setdefault(rule.id, rule)

        if found:
            logger.debug("Found %d interactions across %d medications", len(found), len(medications))
        return list(found.values())


def highest_severity(interactions: Sequence[DrugInteraction]) -> InteractionSeverity | None:
    if not interactions:
        return None
    return max((rule.severity for rule in interactions), key=lambda severity: severity.rank)


default_checker = InteractionChecker()


def check_interactions(
    candidate: HasActiveSubstance, existing: Sequence[HasActiveSubstance]
) -> InteractionCheckResult:
    """Check ``candidate`` against ``existing`` using the built-in rule table."""
    return default_checker.check_interactions(candidate, existing)


def check_all_interactions(medications: Sequence[HasActiveSubstance]) -> list[DrugInteraction]:
    """Check all pairs of ``medications`` using the built-in rule table."""
    return default_checker.check_all_interactions(medications)
