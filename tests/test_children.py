"""Tests for the qualifying child check."""

import pytest

from co_credit_estimator.calculators.children import (
    ISSUES,
    check_child,
    tally_children,
)
from co_credit_estimator.models import Answer, ChildRelationship, EligibilityStatus

YES, NO, NOT_SURE = Answer.YES, Answer.NO, Answer.NOT_SURE
OTHER = ChildRelationship.OTHER


class TestCheckChild:
    """Tests for check_child."""

    def test_all_clear_qualifies(self, make_child):
        check = check_child(make_child(4))
        assert check.is_qualifying
        assert check.status == EligibilityStatus.ELIGIBLE
        assert check.issues == ()

    def test_does_not_live_with_filer(self, make_child):
        check = check_child(make_child(4, lives=NO))
        assert check.status == EligibilityStatus.INELIGIBLE
        assert check.issues == (ISSUES["lives_no"],)

    def test_unsure_residency(self, make_child):
        check = check_child(make_child(4, lives=NOT_SURE))
        assert check.status == EligibilityStatus.MAYBE
        assert not check.is_qualifying

    def test_other_relationship(self, make_child):
        check = check_child(make_child(4, relationship=OTHER))
        assert check.status == EligibilityStatus.MAYBE
        assert check.issues == (ISSUES["relationship_other"],)

    @pytest.mark.parametrize(
        "relationship",
        [r for r in ChildRelationship if r != ChildRelationship.OTHER],
    )
    def test_listed_relationships_qualify(self, make_child, relationship):
        assert check_child(make_child(4, relationship=relationship)).is_qualifying

    def test_no_valid_id_overrides_maybe(self, make_child):
        """A missing ID disqualifies even after an earlier maybe."""
        check = check_child(make_child(4, lives=NOT_SURE, valid_id=NO))
        assert check.status == EligibilityStatus.INELIGIBLE

    def test_maybe_never_lifts_ineligible(self, make_child):
        """Later uncertain answers do not undo a disqualification."""
        check = check_child(
            make_child(4, lives=NO, relationship=OTHER, valid_id=NOT_SURE)
        )
        assert check.status == EligibilityStatus.INELIGIBLE

    def test_issues_in_check_order(self, make_child):
        check = check_child(
            make_child(4, lives=NOT_SURE, relationship=OTHER, valid_id=NOT_SURE)
        )
        assert check.status == EligibilityStatus.MAYBE
        assert check.issues == (
            ISSUES["lives_not_sure"],
            ISSUES["relationship_other"],
            ISSUES["id_not_sure"],
        )

    @pytest.mark.parametrize("lives", list(Answer))
    @pytest.mark.parametrize("relationship", list(ChildRelationship))
    @pytest.mark.parametrize("valid_id", list(Answer))
    def test_verdict_is_worst_of_checks(self, make_child, lives, relationship, valid_id):
        """The verdict equals the worst outcome among the three checks."""
        check = check_child(make_child(8, lives, relationship, valid_id))
        outcomes = {
            YES: EligibilityStatus.ELIGIBLE,
            NOT_SURE: EligibilityStatus.MAYBE,
            NO: EligibilityStatus.INELIGIBLE,
        }
        worst = max(
            [
                outcomes[lives],
                EligibilityStatus.MAYBE if relationship == OTHER else EligibilityStatus.ELIGIBLE,
                outcomes[valid_id],
            ],
            key=lambda s: s.severity,
        )
        assert check.status == worst


class TestTallyChildren:
    """Tests for tally_children."""

    def test_counts_qualifying(self, make_child):
        tally = tally_children([make_child(1), make_child(2), make_child(3, lives=NO)])
        assert tally.count == 2
        assert tally.status == EligibilityStatus.INELIGIBLE
        assert not tally.none_qualify
        assert tally.issues == [ISSUES["lives_no"]]

    def test_none_qualify(self, make_child):
        tally = tally_children([make_child(1, valid_id=NO)])
        assert tally.none_qualify

    def test_maybe_only_is_not_none_qualify(self, make_child):
        tally = tally_children([make_child(1, valid_id=NOT_SURE)])
        assert tally.count == 0
        assert tally.status == EligibilityStatus.MAYBE
        assert not tally.none_qualify

    def test_empty(self):
        tally = tally_children([])
        assert tally.count == 0
        assert tally.status == EligibilityStatus.ELIGIBLE
