"""Tests for the plain-text summary."""

from datetime import date

from co_credit_estimator import calculate_all_credits, summary_report
from co_credit_estimator.models import ColoradoResidency
from co_credit_estimator.report import DISCLAIMER, TITLE


class TestSummaryReport:
    """Tests for summary_report."""

    def _report(self, tax_input, **kwargs):
        results = calculate_all_credits(tax_input)
        return summary_report(tax_input, results, as_of=date(2025, 3, 1), **kwargs)

    def test_header_and_information(self, make_household, make_child):
        text = self._report(make_household(children=(make_child(4), make_child(10))))
        lines = text.splitlines()
        assert lines[0] == TITLE
        assert lines[1] == "=" * len(TITLE)
        assert "Date: 2025-03-01" in lines
        assert "Filing Status: single" in lines
        assert "Colorado Resident: full-year" in lines
        assert "Has Earned Income: yes" in lines
        assert "Number of Children: 2" in lines
        assert text.endswith(DISCLAIMER)

    def test_lists_eligible_credits_and_total(self, make_household, make_child):
        text = self._report(
            make_household(annual_income=20000, children=(make_child(10),))
        )
        assert "Federal Earned Income Tax Credit: Up to $4,213.00" in text
        assert "Colorado Earned Income Tax Credit: Up to $2,107.00" in text
        assert "Colorado Child Tax Credit:" not in text
        assert "TOTAL ESTIMATED BENEFIT\n$10,720.00" in text

    def test_no_eligible_credits(self, make_household):
        text = self._report(
            make_household(
                colorado_resident=ColoradoResidency.NO,
                has_earned_income=False,
                annual_income=0,
            )
        )
        assert "No eligible credits based on your inputs." in text
        assert "$0.00" in text
        assert "NEEDING VERIFICATION" not in text

    def test_maybe_credits_listed_separately(self, make_household, make_child):
        text = self._report(
            make_household(
                colorado_resident=ColoradoResidency.PART_YEAR,
                children=(make_child(4),),
            )
        )
        verification = text.split("CREDITS NEEDING VERIFICATION")[1]
        assert "Colorado Child Tax Credit: Up to $2,000.00" in verification

    def test_details(self, make_household, make_child):
        text = self._report(make_household(children=(make_child(4),)), details=True)
        assert "DETAILS" in text
        assert "Colorado Child Tax Credit [eligible]" in text
        assert "  - 1 qualifying child under age 6" in text
