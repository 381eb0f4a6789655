"""
Federal Child Tax Credit - simplified estimate.

A flat amount per qualifying child under 17, reduced by $50 for each $1,000
(or part of $1,000) of income over the phase-out threshold.
"""

import math

from ..models import (
    CreditResult,
    EligibilityStatus,
    TaxCreditInput,
    format_dollars,
    pluralize_children,
)
from .children import tally_children
from .params import frozen

FEDERAL_CTC_PARAMS = frozen(
    {
        "max_age": 17,  # children strictly under this age
        "credit_per_child": 2000,
        "phaseout_single": 200000,
        "phaseout_joint": 400000,
        "phaseout_rate": 50,  # per $1,000
    }
)


def calculate_federal_ctc(tax_input: TaxCreditInput) -> CreditResult:
    """
    Estimate the Federal Child Tax Credit.

    The income phase-out only lowers the amount; it never changes the status.

    Args:
        tax_input: Household facts

    Returns:
        CreditResult with the phased-out benefit
    """
    p = FEDERAL_CTC_PARAMS

    children = tax_input.children_under(p["max_age"])
    if not children:
        return CreditResult.ineligible(
            "The Federal Child Tax Credit requires at least one child under age 17.",
            "No children under age 17",
        )

    if not tax_input.has_earned_income:
        return CreditResult.ineligible(
            "You must have earned income to qualify for the Federal Child Tax Credit.",
            "No earned income",
        )

    tally = tally_children(children)
    if tally.none_qualify:
        return CreditResult.ineligible(
            "None of your children meet the federal qualifying criteria.",
            *tally.issues,
        )

    benefit = tally.count * p["credit_per_child"]

    threshold = p["phaseout_joint"] if tax_input.is_joint else p["phaseout_single"]
    excess = tax_input.annual_income - threshold
    if excess > 0:
        reduction = math.ceil(excess / 1000) * p["phaseout_rate"]
        benefit = max(0, benefit - reduction)

    reasons = []
    if tally.count > 0:
        reasons.append(
            f"{tally.count} qualifying {pluralize_children(tally.count)} under 17"
        )
        reasons.append(f"{format_dollars(p['credit_per_child'])} per child")
        reasons.append("Have earned income")
    if excess > 0:
        reasons.append("Credit reduced due to income phase-out")
    reasons.extend(tally.issues)

    if tally.status == EligibilityStatus.ELIGIBLE:
        explanation = (
            "The Federal Child Tax Credit provides up to $2,000 per qualifying child "
            f"under 17. You may receive up to {format_dollars(benefit)}."
        )
    else:
        explanation = (
            "You may qualify for the Federal CTC, but some details need "
            f"verification. Potential benefit: up to {format_dollars(benefit)}."
        )

    return CreditResult(
        status=tally.status,
        estimated_benefit=benefit,
        explanation=explanation,
        reasons=tuple(reasons),
    )
