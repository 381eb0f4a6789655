"""
Income helpers: pay-period annualization and amount sanitizing.

The calculators only see an annual income figure. These helpers turn what a
filer reports ("I get $1,200 every two weeks, plus some side work") into that
figure.
"""

import math
import re
from typing import Union

from .models import PayFrequency

# Pay periods per year. "other" is treated like monthly pay.
PAY_PERIODS_PER_YEAR = {
    PayFrequency.WEEKLY: 52,
    PayFrequency.BIWEEKLY: 26,
    PayFrequency.SEMI_MONTHLY: 24,
    PayFrequency.MONTHLY: 12,
    PayFrequency.OTHER: 12,
}

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

Amount = Union[str, int, float, None]


def calculate_annual_income(frequency: Union[PayFrequency, str], amount: float) -> float:
    """
    Convert a per-period pay amount to annual income.

    Args:
        frequency: How often the filer is paid
        amount: Pay per period; callers sanitize it first (see parse_amount)

    Returns:
        amount times the number of pay periods in a year
    """
    return amount * PAY_PERIODS_PER_YEAR[PayFrequency(frequency)]


def parse_amount(value: Amount) -> float:
    """
    Sanitize a user-entered amount.

    Numbers pass through. Strings are read up to the first character that
    can't be part of a number, so ``"1200.50 per check"`` gives ``1200.5``.
    Anything unparseable, non-finite or negative becomes ``0.0``.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value).replace(",", ""))
        if not match:
            return 0.0
        number = float(match.group(0))

    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number


def estimate_annual_income(
    has_earned_income: bool,
    frequency: Union[PayFrequency, str],
    pay_amount: Amount,
    additional_income: Amount = 0,
) -> float:
    """
    Annual income as the questionnaire computes it.

    Filers without earned income report zero income. Otherwise the pay per
    period is annualized and any additional yearly income is added on top.
    """
    if not has_earned_income:
        return 0.0
    return calculate_annual_income(frequency, parse_amount(pay_amount)) + parse_amount(
        additional_income
    )
