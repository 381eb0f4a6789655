"""
Colorado Child Tax Credit - children under age 6.

Simplified estimate: a flat amount per qualifying child under a single
income limit per filing status.
"""

from ..models import (
    CreditResult,
    EligibilityStatus,
    TaxCreditInput,
    combine_status,
    format_dollars,
    pluralize_children,
)
from .children import tally_children
from .params import PART_YEAR_REASON, frozen

COLORADO_CTC_PARAMS = frozen(
    {
        "max_age": 6,  # children strictly under this age
        "credit_per_child": 2000,
        "income_limit_joint": 85000,
        "income_limit_other": 75000,
    }
)


def calculate_colorado_ctc(tax_input: TaxCreditInput) -> CreditResult:
    """
    Estimate the Colorado Child Tax Credit.

    Args:
        tax_input: Household facts

    Returns:
        CreditResult; ineligible with no benefit when the filer is not a
        Colorado resident, has no child under 6 or is over the income limit
    """
    p = COLORADO_CTC_PARAMS

    if not tax_input.is_colorado_resident:
        return CreditResult.ineligible(
            "The Colorado Child Tax Credit is only available to Colorado residents.",
            "Not a Colorado resident",
        )

    young_children = tax_input.children_under(p["max_age"])
    if not young_children:
        return CreditResult.ineligible(
            "The Colorado Child Tax Credit is only for children under age 6.",
            "No children under age 6",
        )

    income_limit = (
        p["income_limit_joint"] if tax_input.is_joint else p["income_limit_other"]
    )
    if tax_input.annual_income > income_limit:
        return CreditResult.ineligible(
            "Your income exceeds the limit for the Colorado Child Tax Credit "
            f"({format_dollars(income_limit)} for your filing status).",
            f"Income over {format_dollars(income_limit)} limit",
        )

    tally = tally_children(young_children)
    if tally.none_qualify:
        return CreditResult.ineligible(
            "None of your children under 6 meet the qualifying criteria.",
            *tally.issues,
        )

    benefit = tally.count * p["credit_per_child"]
    status = tally.status

    reasons = []
    if tally.count > 0:
        reasons.append(
            f"{tally.count} qualifying {pluralize_children(tally.count)} under age 6"
        )
        reasons.append(f"{format_dollars(p['credit_per_child'])} per child")
        reasons.append(f"Income within {format_dollars(income_limit)} limit")
    if tax_input.is_part_year_resident:
        reasons.append(PART_YEAR_REASON)
        status = combine_status(status, EligibilityStatus.MAYBE)
    reasons.extend(tally.issues)

    if status == EligibilityStatus.ELIGIBLE:
        explanation = (
            "The Colorado Child Tax Credit provides $2,000 for each qualifying "
            f"child under age 6. You may receive up to {format_dollars(benefit)}."
        )
    else:
        explanation = (
            "You may qualify for the Colorado Child Tax Credit, but some details "
            f"need verification. Potential benefit: up to {format_dollars(benefit)}."
        )

    return CreditResult(
        status=status,
        estimated_benefit=benefit,
        explanation=explanation,
        reasons=tuple(reasons),
    )
