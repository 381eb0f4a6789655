"""
Federal Earned Income Tax Credit - simplified estimate.

The real credit uses statutory phase-in and phase-out rates. This estimate
shapes the credit as a trapezoid over the income limit for the household:
it phases in over the first 20% of the limit, stays flat at the maximum, and
phases out linearly from 50% of the limit down to zero at the limit.
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
from .children import check_child
from .params import frozen

_LIMITS_OTHER = {0: 18591, 1: 49084, 2: 55768, 3: 59899}
_LIMITS_JOINT = {0: 25511, 1: 56004, 2: 62688, 3: 66819}

FEDERAL_EITC_PARAMS = frozen(
    {
        # Approximate income limits by filing status and qualifying children
        "income_limit": {
            FilingStatus.SINGLE: _LIMITS_OTHER,
            FilingStatus.HEAD_OF_HOUSEHOLD: _LIMITS_OTHER,
            FilingStatus.MARRIED_SEPARATE: _LIMITS_OTHER,
            FilingStatus.MARRIED_JOINT: _LIMITS_JOINT,
        },
        "max_credit": {0: 632, 1: 4213, 2: 6960, 3: 7830},
        "max_children": 3,
        "phase_in_end_pct": 20,  # percent of income limit
        "phase_out_start_pct": 50,  # percent of income limit
    }
)


def calculate_federal_eitc(tax_input: TaxCreditInput) -> CreditResult:
    """
    Estimate the Federal EITC.

    Children who are clearly disqualified are left out of the count without
    affecting the status; only children with open questions lower the
    status to maybe.

    Args:
        tax_input: Household facts

    Returns:
        CreditResult with the estimated credit
    """
    p = FEDERAL_EITC_PARAMS
    income = tax_input.annual_income

    if not tax_input.has_earned_income or income == 0:
        return CreditResult.ineligible(
            "You must have earned income to qualify for the Federal Earned Income "
            "Tax Credit.",
            "No earned income",
        )

    n_qualifying = 0
    status = EligibilityStatus.ELIGIBLE
    issues = []
    for child in tax_input.children:
        check = check_child(child)
        if check.is_qualifying:
            n_qualifying += 1
        elif check.status == EligibilityStatus.MAYBE:
            status = combine_status(status, EligibilityStatus.MAYBE)
            issues.extend(check.issues)

    n = min(n_qualifying, p["max_children"])
    income_limit = p["income_limit"][tax_input.filing_status][n]
    max_credit = p["max_credit"][n]

    if income > income_limit:
        return CreditResult.ineligible(
            "Your income exceeds the limit for the Federal EITC "
            f"({format_dollars(income_limit)} for your situation).",
            f"Income over {format_dollars(income_limit)} limit",
        )

    phase_in_end = income_limit * p["phase_in_end_pct"] / 100
    phase_out_start = income_limit * p["phase_out_start_pct"] / 100

    credit = max_credit
    if income < phase_in_end:
        credit = max_credit * (income / phase_in_end)
    elif income > phase_out_start:
        credit = max_credit * (
            1 - (income - phase_out_start) / (income_limit - phase_out_start)
        )
    amount = round_half_up(credit)

    reasons = [
        "Have earned income",
        f"{n_qualifying} qualifying {pluralize_children(n_qualifying)}",
        "Income within eligible range",
        *issues,
    ]

    if status == EligibilityStatus.ELIGIBLE:
        explanation = (
            "The Federal EITC helps workers with lower to moderate income. Based "
            f"on your income and {n_qualifying} {pluralize_children(n_qualifying)}, "
            f"you may receive approximately {format_dollars(amount)}."
        )
    else:
        explanation = (
            "You may qualify for the Federal EITC, but some details need "
            f"verification. Potential benefit: up to {format_dollars(amount)}."
        )

    return CreditResult(
        status=status,
        estimated_benefit=amount,
        explanation=explanation,
        reasons=tuple(reasons),
    )
