"""
Colorado Family Affordability Tax Credit (FATC).

Simplified estimate: a per-child amount that depends on the child's age band,
reduced linearly across an income phase-out range.
"""

from ..models import (
    CreditResult,
    EligibilityStatus,
    FilingStatus,
    TaxCreditInput,
    combine_status,
    format_dollars,
    pluralize_children,
    round_half_up,
)
from .children import tally_children
from .params import PART_YEAR_REASON, frozen

FATC_PARAMS = frozen(
    {
        "young_max_age": 6,  # under 6
        "older_max_age": 17,  # 6 through 16
        "credit_young": 3200,
        "credit_older": 2400,
        "phaseout_start": {
            FilingStatus.SINGLE: 75000,
            FilingStatus.HEAD_OF_HOUSEHOLD: 85000,
            FilingStatus.MARRIED_JOINT: 85000,
            FilingStatus.MARRIED_SEPARATE: 75000,
        },
        "phaseout_end": {
            FilingStatus.SINGLE: 100000,
            FilingStatus.HEAD_OF_HOUSEHOLD: 110000,
            FilingStatus.MARRIED_JOINT: 110000,
            FilingStatus.MARRIED_SEPARATE: 100000,
        },
    }
)


def calculate_colorado_fatc(tax_input: TaxCreditInput) -> CreditResult:
    """
    Estimate the Colorado Family Affordability Tax Credit.

    Args:
        tax_input: Household facts

    Returns:
        CreditResult with the phased-out benefit
    """
    p = FATC_PARAMS

    if not tax_input.is_colorado_resident:
        return CreditResult.ineligible(
            "The Colorado Family Affordability Tax Credit is only available to "
            "Colorado residents.",
            "Not a Colorado resident",
        )

    young = tax_input.children_under(p["young_max_age"])
    older = tuple(
        c
        for c in tax_input.children
        if p["young_max_age"] <= c.age < p["older_max_age"]
    )
    if not young and not older:
        return CreditResult.ineligible(
            "The Colorado Family Affordability Tax Credit requires at least one "
            "child under age 17.",
            "No qualifying children under age 17",
        )

    tally = tally_children(young + older)
    if tally.none_qualify:
        return CreditResult.ineligible(
            "None of your children meet the qualifying criteria for FATC.",
            *tally.issues,
        )

    n_young = sum(1 for c in tally.qualifying if c.age < p["young_max_age"])
    n_older = tally.count - n_young
    benefit: float = n_young * p["credit_young"] + n_older * p["credit_older"]

    reasons = []
    start = p["phaseout_start"][tax_input.filing_status]
    end = p["phaseout_end"][tax_input.filing_status]
    income = tax_input.annual_income

    if income > start:
        if income >= end:
            return CreditResult.ineligible(
                "Your income exceeds the limit for the Colorado Family "
                f"Affordability Tax Credit (phases out at {format_dollars(end)} "
                "for your filing status).",
                f"Income over {format_dollars(end)}",
            )
        benefit = benefit * (1 - (income - start) / (end - start))
        reasons.append("Credit reduced due to income phase-out")

    if n_young > 0:
        reasons.append(
            f"{n_young} qualifying {pluralize_children(n_young)} under 6 "
            f"({format_dollars(p['credit_young'])} each)"
        )
    if n_older > 0:
        reasons.append(
            f"{n_older} qualifying {pluralize_children(n_older)} age 6-16 "
            f"({format_dollars(p['credit_older'])} each)"
        )

    status = tally.status
    if tax_input.is_part_year_resident:
        reasons.append(PART_YEAR_REASON)
        status = combine_status(status, EligibilityStatus.MAYBE)
    reasons.extend(tally.issues)

    amount = round_half_up(benefit)
    if status == EligibilityStatus.ELIGIBLE:
        explanation = (
            "The Colorado FATC provides up to $3,200 per child under 6 and $2,400 "
            f"per child age 6-16. You may receive approximately {format_dollars(amount)}."
        )
    else:
        explanation = (
            "You may qualify for the Colorado FATC, but some details need "
            f"verification. Potential benefit: up to {format_dollars(amount)}."
        )

    return CreditResult(
        status=status,
        estimated_benefit=amount,
        explanation=explanation,
        reasons=tuple(reasons),
    )
