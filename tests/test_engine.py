"""Tests for the aggregate estimate."""

import pytest

from co_credit_estimator import calculate_all_credits
from co_credit_estimator.models import (
    Answer,
    CareWorkerType,
    ColoradoResidency,
    EligibilityStatus,
    FilingStatus,
)

ELIGIBLE = EligibilityStatus.ELIGIBLE


def _total_of_eligible(results):
    return sum(r.estimated_benefit for _, r in results.items() if r.status == ELIGIBLE)


class TestCalculateAllCredits:
    """Tests for calculate_all_credits."""

    def test_working_family_with_school_age_child(self, make_household, make_child):
        results = calculate_all_credits(
            make_household(annual_income=20000, children=(make_child(10),))
        )
        assert results.colorado_ctc.status == EligibilityStatus.INELIGIBLE
        assert results.colorado_fatc.estimated_benefit == 2400
        assert results.federal_eitc.estimated_benefit == 4213
        assert results.colorado_eitc.estimated_benefit == 2107
        assert results.colorado_care_worker.status == EligibilityStatus.INELIGIBLE
        assert results.federal_ctc.estimated_benefit == 2000
        assert results.total_estimated_benefit == 2400 + 4213 + 2107 + 2000

    def test_young_child_colorado_ctc(self, make_household, make_child):
        results = calculate_all_credits(make_household(children=(make_child(4),)))
        assert results.colorado_ctc.status == ELIGIBLE
        assert results.colorado_ctc.estimated_benefit == 2000

    def test_colorado_eitc_follows_federal(self, make_household):
        """No earned income: both EITCs are ineligible."""
        results = calculate_all_credits(
            make_household(has_earned_income=False, annual_income=0)
        )
        assert results.federal_eitc.status == EligibilityStatus.INELIGIBLE
        assert results.colorado_eitc.status == EligibilityStatus.INELIGIBLE
        assert results.colorado_eitc.estimated_benefit == 0

    def test_maybe_results_not_totaled(self, make_household, make_child):
        results = calculate_all_credits(
            make_household(
                colorado_resident=ColoradoResidency.PART_YEAR,
                annual_income=20000,
                children=(make_child(4),),
                is_care_worker=True,
                care_worker_type=CareWorkerType.CHILDCARE,
                care_worker_hours=1000,
            )
        )
        assert results.colorado_ctc.status == EligibilityStatus.MAYBE
        assert results.colorado_ctc.estimated_benefit == 2000
        assert results.colorado_care_worker.status == EligibilityStatus.MAYBE
        assert results.total_estimated_benefit == _total_of_eligible(results)
        assert results.total_estimated_benefit == (
            results.federal_eitc.estimated_benefit
            + results.colorado_eitc.estimated_benefit
            + results.federal_ctc.estimated_benefit
        )

    @pytest.mark.parametrize("filing_status", list(FilingStatus))
    @pytest.mark.parametrize("resident", list(ColoradoResidency))
    @pytest.mark.parametrize("income", [0, 9000, 30000, 80000, 105000, 450000])
    def test_total_and_non_negative(
        self, make_household, make_child, filing_status, resident, income
    ):
        """Total equals the eligible sum and no amount is negative."""
        results = calculate_all_credits(
            make_household(
                filing_status=filing_status,
                colorado_resident=resident,
                annual_income=income,
                children=(
                    make_child(2),
                    make_child(9, lives=Answer.NOT_SURE),
                    make_child(15, valid_id=Answer.NO),
                ),
            )
        )
        assert results.total_estimated_benefit == _total_of_eligible(results)
        assert results.total_estimated_benefit >= 0
        for _, result in results.items():
            assert result.estimated_benefit >= 0
            if result.status == EligibilityStatus.INELIGIBLE and not result.reasons:
                pytest.fail("ineligible result without a reason")

    def test_idempotent(self, make_household, make_child):
        tax_input = make_household(
            annual_income=33000,
            children=(make_child(1), make_child(12, lives=Answer.NOT_SURE)),
        )
        assert calculate_all_credits(tax_input) == calculate_all_credits(tax_input)
        assert (
            calculate_all_credits(tax_input).to_dict()
            == calculate_all_credits(tax_input).to_dict()
        )

    def test_child_care_expenses_do_not_change_results(self, make_household, make_child):
        base = make_household(children=(make_child(3),))
        with_expenses = make_household(
            children=(make_child(3),),
            has_child_care_expenses=True,
            child_care_expenses=8000,
        )
        assert calculate_all_credits(base) == calculate_all_credits(with_expenses)
