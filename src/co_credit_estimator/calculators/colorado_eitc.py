"""
Colorado Earned Income Tax Credit.

Colorado pays a percentage of the federal EITC, so this calculator works from
the federal result rather than from the household facts alone.
"""

from ..models import (
    CreditResult,
    EligibilityStatus,
    TaxCreditInput,
    format_dollars,
    round_half_up,
)
from .params import PART_YEAR_REASON, frozen

COLORADO_EITC_PARAMS = frozen(
    {
        "federal_match_pct": 50,
    }
)


def calculate_colorado_eitc(
    tax_input: TaxCreditInput, federal_eitc: CreditResult
) -> CreditResult:
    """
    Estimate the Colorado EITC.

    Args:
        tax_input: Household facts
        federal_eitc: Result of calculate_federal_eitc for the same household

    Returns:
        CreditResult whose status mirrors the federal status
    """
    if not tax_input.is_colorado_resident:
        return CreditResult.ineligible(
            "The Colorado Earned Income Tax Credit is only available to Colorado "
            "residents.",
            "Not a Colorado resident",
        )

    if federal_eitc.status == EligibilityStatus.INELIGIBLE:
        return CreditResult.ineligible(
            "You must qualify for the Federal EITC to receive the Colorado EITC.",
            "Not eligible for Federal EITC",
        )

    match_pct = COLORADO_EITC_PARAMS["federal_match_pct"]
    amount = round_half_up(federal_eitc.estimated_benefit * match_pct / 100)

    reasons = [
        f"{match_pct}% of Federal EITC",
        f"Federal EITC: {format_dollars(federal_eitc.estimated_benefit)}",
        "Colorado resident",
    ]
    # Part-year residency is noted but the status follows the federal credit
    if tax_input.is_part_year_resident:
        reasons.append(PART_YEAR_REASON)

    if federal_eitc.status == EligibilityStatus.ELIGIBLE:
        explanation = (
            f"The Colorado EITC is {match_pct}% of your Federal EITC. You may "
            f"receive approximately {format_dollars(amount)}."
        )
    else:
        explanation = (
            f"You may qualify for the Colorado EITC ({match_pct}% of Federal EITC), "
            "but some details need verification. Potential benefit: up to "
            f"{format_dollars(amount)}."
        )

    return CreditResult(
        status=federal_eitc.status,
        estimated_benefit=amount,
        explanation=explanation,
        reasons=tuple(reasons),
    )
