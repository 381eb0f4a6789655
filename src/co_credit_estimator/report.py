"""
Plain-text estimate summary.

The same content the questionnaire offers as a downloadable text file.
"""

from datetime import date
from typing import List, Optional

from .models import (
    CREDITS,
    EligibilityStatus,
    TaxCreditInput,
    TaxCreditResults,
    format_dollars,
)

TITLE = "Colorado Tax Credit & Eligibility Estimator - Results"
DISCLAIMER = (
    "Disclaimer: This is an estimate only - actual eligibility and amounts "
    "depend on final tax filing and documentation."
)


# Two decimals, like the downloadable text summary
def _benefit(results: TaxCreditResults, name: str) -> str:
    return format_dollars(getattr(results, name).estimated_benefit, cents=True)


def summary_report(
    tax_input: TaxCreditInput,
    results: TaxCreditResults,
    as_of: Optional[date] = None,
    details: bool = False,
) -> str:
    """
    Render an estimate as plain text.

    Args:
        tax_input: The household facts that were estimated
        results: Output of calculate_all_credits
        as_of: Date printed in the header (default: today)
        details: Also list every credit with its status and reasons

    Returns:
        The report text, without a trailing newline
    """
    as_of = as_of or date.today()
    lines: List[str] = [
        TITLE,
        "=" * len(TITLE),
        f"Date: {as_of.isoformat()}",
        "",
        "YOUR INFORMATION",
        f"Filing Status: {tax_input.filing_status.value}",
        f"Colorado Resident: {tax_input.colorado_resident.value}",
        f"Has Earned Income: {'yes' if tax_input.has_earned_income else 'no'}",
        f"Number of Children: {len(tax_input.children)}",
        "",
        "ELIGIBLE CREDITS",
    ]

    eligible = [
        f"{label}: Up to {_benefit(results, name)}"
        for name, _, label in CREDITS
        if getattr(results, name).is_eligible
    ]
    lines.extend(eligible or ["No eligible credits based on your inputs."])

    maybe = [
        f"{label}: Up to {_benefit(results, name)}"
        for name, _, label in CREDITS
        if getattr(results, name).status == EligibilityStatus.MAYBE
    ]
    if maybe:
        lines.extend(["", "CREDITS NEEDING VERIFICATION (not included in total)"])
        lines.extend(maybe)

    lines.extend(
        [
            "",
            "TOTAL ESTIMATED BENEFIT",
            format_dollars(results.total_estimated_benefit, cents=True),
        ]
    )

    if details:
        lines.extend(["", "DETAILS"])
        for name, _, label in CREDITS:
            result = getattr(results, name)
            lines.append(f"{label} [{result.status.value}]")
            lines.append(f"  {result.explanation}")
            lines.extend(f"  - {reason}" for reason in result.reasons)

    lines.extend(["", DISCLAIMER])
    return "\n".join(lines)
