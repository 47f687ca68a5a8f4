"""
Tests for the drug-interaction checker.
"""

import pytest

from medminder.domain.entities.drug_interaction import (
    DrugInteraction,
    InteractionSeverity,
    SubstanceRef,
)
from medminder.domain.services.interaction_checker import (
    InteractionChecker,
    check_all_interactions,
    check_interactions,
    highest_severity,
    normalize_substance,
    substances_match,
)
from medminder.tests.helpers.factories import make_medication


def _med(med_id: str, substance: str):
    return make_medication(id=med_id, name=substance.title(), active_substance=substance)


class TestNormalization:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  Warfaryna ", "warfaryna"),
            ("Środki kontrastowe", "srodki kontrastowe"),
            ("AMLODYPINA", "amlodypina"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_substance(raw) == expected

    def test_substring_matches_both_ways(self):
        assert substances_match("Paracetamol, Kofeina", "paracetamol")
        assert substances_match("paracetamol", "Paracetamol, Kofeina")
        assert not substances_match("ibuprofen", "paracetamol")

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_is_contained_in_every_name(self, blank):
        assert substances_match(blank, "warfaryna")
        assert substances_match("warfaryna", blank)


class TestCheckInteractions:
    def test_warfarin_and_ibuprofen(self):
        result = check_interactions(_med("a", "Warfaryna"), [_med("b", "Ibuprofen")])

        assert result.has_interaction is True
        assert [rule.id for rule in result.interactions] == ["2"]
        assert result.highest_severity == InteractionSeverity.HIGH

    def test_symmetric(self):
        forward = check_interactions(_med("a", "Warfaryna"), [_med("b", "Ibuprofen")])
        backward = check_interactions(_med("b", "Ibuprofen"), [_med("a", "Warfaryna")])

        assert forward.interactions == backward.interactions

    def test_substance_ref_before_saving(self):
        result = check_interactions(
            SubstanceRef(active_substance="Metformina"),
            [_med("x", "Srodki kontrastowe")],
        )

        assert [rule.id for rule in result.interactions] == ["5"]

    def test_compound_substance_field(self):
        result = check_interactions(
            _med("a", "Paracetamol, Kofeina"), [_med("b", "Warfaryna")]
        )

        assert [rule.id for rule in result.interactions] == ["3"]
        assert result.highest_severity == InteractionSeverity.MEDIUM

    def test_no_interaction(self):
        result = check_interactions(_med("a", "Amoksycylina"), [_med("b", "Warfaryna")])

        assert result.has_interaction is False
        assert result.interactions == []
        assert result.highest_severity is None

    def test_blank_substance_matches_every_rule_of_the_other(self):
        # "" is a substring of every rule substance, so only the other side filters
        result = check_interactions(SubstanceRef(active_substance=""), [_med("b", "Ibuprofen")])

        assert [rule.id for rule in result.interactions] == ["2", "6", "7", "9"]
        assert result.highest_severity == InteractionSeverity.HIGH

    def test_blank_existing_medication_is_symmetric(self):
        forward = check_interactions(_med("a", "Ibuprofen"), [_med("b", "")])
        backward = check_interactions(_med("b", ""), [_med("a", "Ibuprofen")])

        assert forward.interactions == backward.interactions

    def test_rule_reported_once_across_existing(self):
        result = check_interactions(
            _med("a", "Warfaryna"), [_med("b", "Ibuprofen"), _med("c", "Ibuprofen")]
        )

        assert [rule.id for rule in result.interactions] == ["2"]

    def test_custom_rule_table(self):
        checker = InteractionChecker(
            rules=[
                DrugInteraction(
                    id="x",
                    substance1="alpha",
                    substance2="beta",
                    severity=InteractionSeverity.LOW,
                    description="test",
                    recommendation="test",
                )
            ]
        )

        result = checker.check_interactions(_med("a", "Beta"), [_med("b", "Alpha")])

        assert [rule.id for rule in result.interactions] == ["x"]


class TestCheckAllInteractions:
    def test_pairs_in_discovery_order(self):
        medications = [
            _med("a", "Warfaryna"),
            _med("b", "Kwas acetylosalicylowy"),
            _med("c", "Ibuprofen"),
        ]

        interactions = check_all_interactions(medications)

        assert [rule.id for rule in interactions] == ["1", "2", "6"]
        assert highest_severity(interactions) == InteractionSeverity.HIGH

    def test_duplicates_removed(self):
        medications = [_med("a", "Warfaryna"), _med("b", "Ibuprofen"), _med("c", "Ibuprofen")]

        assert [rule.id for rule in check_all_interactions(medications)] == ["2"]

    def test_fewer_than_two_medications(self):
        assert check_all_interactions([]) == []
        assert check_all_interactions([_med("a", "Warfaryna")]) == []

    def test_critical_is_highest(self):
        interactions = check_all_interactions(
            [_med("a", "Alprazolam"), _med("b", "Tramadol"), _med("c", "Ibuprofen")]
        )

        assert highest_severity(interactions) == InteractionSeverity.CRITICAL
