"""
co-credit-estimator: Estimate Colorado and federal tax credits.

Simplified eligibility and benefit estimates for the Colorado Child Tax
Credit, Family Affordability Tax Credit, Earned Income Tax Credit and Care
Worker Credit, and the federal Child Tax Credit and Earned Income Tax Credit.
Amounts and thresholds are illustrative, not tax advice.
"""

from .engine import calculate_all_credits
from .income import calculate_annual_income, estimate_annual_income, parse_amount
from .models import (
    Answer,
    CareWorkerType,
    ChildInfo,
    ChildRelationship,
    ColoradoResidency,
    CreditResult,
    EligibilityStatus,
    FilingStatus,
    PayFrequency,
    TaxCreditInput,
    TaxCreditResults,
    combine_status,
)
from .report import summary_report

__version__ = "0.1.0"
__all__ = [
    "calculate_all_credits",
    "calculate_annual_income",
    "estimate_annual_income",
    "parse_amount",
    "summary_report",
    "combine_status",
    "Answer",
    "CareWorkerType",
    "ChildInfo",
    "ChildRelationship",
    "ColoradoResidency",
    "CreditResult",
    "EligibilityStatus",
    "FilingStatus",
    "PayFrequency",
    "TaxCreditInput",
    "TaxCreditResults",
]
