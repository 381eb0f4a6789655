"""
Colorado Care Worker Tax Credit.

Flat credit for childcare workers (children 5 and under) and direct care
workers in long-term care who worked enough hours in the year.
"""

from ..models import (
    CareWorkerType,
    CreditResult,
    EligibilityStatus,
    TaxCreditInput,
    format_dollars,
)
from .params import PART_YEAR_REASON, frozen

CARE_WORKER_PARAMS = frozen(
    {
        "credit": 1200,
        "min_hours": 720,
        "income_limit_joint": 100000,
        "income_limit_other": 75000,
    }
)

CARE_TYPE_LABELS = {
    CareWorkerType.CHILDCARE: "Childcare worker (children age 5 and under)",
    CareWorkerType.DIRECT_CARE: "Direct care worker (long-term care)",
}


def calculate_care_worker_credit(tax_input: TaxCreditInput) -> CreditResult:
    """
    Estimate the Colorado Care Worker Tax Credit.

    Checks run in order and the first failure ends the calculation: care
    worker status, residency, hours worked, income.
    """
    p = CARE_WORKER_PARAMS
    care_type = tax_input.care_worker_type
    hours = tax_input.care_worker_hours

    if not tax_input.is_care_worker or care_type in (None, CareWorkerType.NONE):
        return CreditResult.ineligible(
            "The Colorado Care Worker Tax Credit is for childcare workers (caring "
            "for children 5 and under) and direct care workers in long-term care.",
            "Not a care worker",
        )

    if not tax_input.is_colorado_resident:
        return CreditResult.ineligible(
            "The Colorado Care Worker Tax Credit is only available to Colorado "
            "residents.",
            "Not a Colorado resident",
        )

    if not hours or hours < p["min_hours"]:
        return CreditResult.ineligible(
            f"You must have worked at least {p['min_hours']} hours in the tax year "
            "to qualify for the Care Worker Tax Credit.",
            f"Less than {p['min_hours']} hours worked",
        )

    income_limit = (
        p["income_limit_joint"] if tax_input.is_joint else p["income_limit_other"]
    )
    if tax_input.annual_income > income_limit:
        return CreditResult.ineligible(
            "Your income exceeds the limit for the Colorado Care Worker Tax Credit "
            f"({format_dollars(income_limit)} for your filing status).",
            f"Income over {format_dollars(income_limit)} limit",
        )

    amount = p["credit"]
    hours_text = f"{int(hours)}" if float(hours).is_integer() else f"{hours}"
    reasons = [
        CARE_TYPE_LABELS[care_type],
        f"Worked {hours_text} hours (minimum {p['min_hours']} required)",
        f"Income within {format_dollars(income_limit)} limit",
        "Colorado resident",
    ]

    status = EligibilityStatus.ELIGIBLE
    if tax_input.is_part_year_resident:
        reasons.append(PART_YEAR_REASON)
        status = EligibilityStatus.MAYBE

    if status == EligibilityStatus.ELIGIBLE:
        explanation = (
            "The Colorado Care Worker Tax Credit provides $1,200 for qualifying "
            f"care workers. You may receive {format_dollars(amount)}."
        )
    else:
        explanation = (
            "You may qualify for the Colorado Care Worker Tax Credit "
            f"({format_dollars(amount)}), but some details need verification."
        )

    return CreditResult(
        status=status,
        estimated_benefit=amount,
        explanation=explanation,
        reasons=tuple(reasons),
    )
