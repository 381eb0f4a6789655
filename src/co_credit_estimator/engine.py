"""
Aggregate credit estimate for a household.

Runs every calculator on the same input. The Federal EITC is computed before
the Colorado EITC because the state credit is a share of the federal one.
"""

from .calculators import (
    calculate_care_worker_credit,
    calculate_colorado_ctc,
    calculate_colorado_eitc,
    calculate_colorado_fatc,
    calculate_federal_ctc,
    calculate_federal_eitc,
)
from .logging import get_logger
from .models import TaxCreditInput, TaxCreditResults

logger = get_logger(__name__)


def calculate_all_credits(tax_input: TaxCreditInput) -> TaxCreditResults:
    """
    Estimate all six credits.

    Args:
        tax_input: Household facts

    Returns:
        TaxCreditResults; the total only counts credits whose status is
        eligible
    """
    colorado_ctc = calculate_colorado_ctc(tax_input)
    colorado_fatc = calculate_colorado_fatc(tax_input)
    federal_eitc = calculate_federal_eitc(tax_input)
    colorado_eitc = calculate_colorado_eitc(tax_input, federal_eitc)
    colorado_care_worker = calculate_care_worker_credit(tax_input)
    federal_ctc = calculate_federal_ctc(tax_input)

    results = TaxCreditResults(
        colorado_ctc=colorado_ctc,
        colorado_fatc=colorado_fatc,
        colorado_eitc=colorado_eitc,
        colorado_care_worker=colorado_care_worker,
        federal_ctc=federal_ctc,
        federal_eitc=federal_eitc,
    )

    for credit, result in results.items():
        logger.debug(
            "credit_evaluated",
            credit=credit,
            status=result.status.value,
            benefit=result.estimated_benefit,
        )
    logger.info(
        "credits_estimated",
        filing_status=tax_input.filing_status.value,
        n_children=len(tax_input.children),
        total=results.total_estimated_benefit,
    )
    return results
