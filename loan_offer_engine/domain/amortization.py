"""Amortization schedule generation for fixed-rate monthly loans"""

from typing import List

from loan_offer_engine.domain.emi import compute_emi
from loan_offer_engine.domain.models import AmortizationEntry, LoanQuote
from loan_offer_engine.utils.money import ZERO, round_currency, to_decimal


def generate_schedule(principal: float, annual_rate_percent: float, term_months: int) -> List[AmortizationEntry]:
    """
    Split every installment of a loan into interest and principal.

    Requirements:
    - EMI computed once, identical to compute_emi() for the same terms
    - interest = running balance * monthly rate, principal paid = EMI - interest
    - running balance kept at full precision; only reported amounts are
      rounded to cents, and the reported balance never goes below zero
    - final period settles whatever is left, so the last balance is 0.00 and
      reported principal sums to the principal

    Args:
        principal: Amount borrowed
        annual_rate_percent: Nominal annual rate, e.g. 12 for 12%
        term_months: Number of monthly installments

    Returns:
        One AmortizationEntry per period, periods 1..term_months

    Raises:
        InvalidInputError: On degenerate arguments (checked before any entry
            is built, so no partial schedule is ever returned)

    Example:
        generate_schedule(100000, 12, 12)[2]
        -> period=3, emi=8884.88, interest_paid=841.51, principal_paid=8043.37,
           remaining_balance=76108.03
    """
    emi = compute_emi(principal, annual_rate_percent, term_months)
    monthly_rate = float(annual_rate_percent) / 1200
    term_months = int(term_months)

    balance = float(principal)
    principal_reported = ZERO
    schedule = []
    for period in range(1, term_months + 1):
        interest = balance * monthly_rate

        if period < term_months:
            principal_paid = round_currency(emi - interest)
            balance -= emi - interest
            installment = to_decimal(emi)
        else:
            # Last installment absorbs the cents the rounded EMI over- or under-pays
            principal_paid = round_currency(principal) - principal_reported
            balance = 0.0
            installment = principal_paid + round_currency(interest)

        principal_reported += principal_paid

        schedule.append(
            AmortizationEntry(
                period=period,
                emi=float(installment),
                principal_paid=float(principal_paid),
                interest_paid=float(round_currency(interest)),
                remaining_balance=float(max(round_currency(balance), ZERO)),
            )
        )

    return schedule


def quote_loan(principal: float, annual_rate_percent: float, term_months: int) -> LoanQuote:
    """
    EMI, total interest and total payable alongside the full schedule.

    Totals are what the schedule actually charges: the settled last
    installment is counted as billed, not as another full EMI.
    """
    schedule = generate_schedule(principal, annual_rate_percent, term_months)

    total_interest = sum(to_decimal(entry.interest_paid) for entry in schedule)
    total_amount = sum(to_decimal(entry.emi) for entry in schedule)

    return LoanQuote(
        emi=compute_emi(principal, annual_rate_percent, term_months),
        total_interest=float(round_currency(total_interest)),
        total_amount=float(round_currency(total_amount)),
        schedule=schedule,
    )
