"""Equated monthly installment (EMI) calculation"""

import math
from decimal import InvalidOperation

from loan_offer_engine.domain.exceptions import InvalidInputError
from loan_offer_engine.utils.money import is_number, round_currency


def check_loan_terms(principal: float, annual_rate_percent: float, term_months: int) -> None:
    """
    Reject arguments the reducing-balance formula cannot handle.

    Raises:
        InvalidInputError: On non-finite or non-positive principal or rate,
            or a term that is not a positive whole number of months
    """
    if not is_number(principal) or principal <= 0:
        raise InvalidInputError(f"Principal must be a positive finite number, got {principal!r}")
    if not is_number(annual_rate_percent) or annual_rate_percent <= 0:
        raise InvalidInputError(f"Interest rate must be a positive finite number, got {annual_rate_percent!r}")
    if not is_number(term_months) or term_months != int(term_months) or term_months <= 0:
        raise InvalidInputError(f"Term must be a positive whole number of months, got {term_months!r}")


def compute_emi(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """
    Fixed monthly installment on the reducing-balance method.

        r   = annual_rate_percent / 1200
        EMI = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Rounded to cents, halves up.

    Example:
        compute_emi(100000, 12, 12) -> 8884.88
    """
    check_loan_terms(principal, annual_rate_percent, term_months)

    monthly_rate = float(annual_rate_percent) / 1200
    try:
        growth = (1 + monthly_rate) ** int(term_months)
        emi = float(principal) * monthly_rate * growth / (growth - 1)
    except (OverflowError, ZeroDivisionError) as e:
        raise InvalidInputError(f"EMI is not computable for these terms: {e}") from e

    if not math.isfinite(emi):
        raise InvalidInputError("EMI is not computable for these terms")

    try:
        return float(round_currency(emi))
    except InvalidOperation as e:
        raise InvalidInputError(f"EMI is not representable in cents: {emi!r}") from e
