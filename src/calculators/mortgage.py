"""Mortgage repayment calculator.

Pure Python. Monthly repayment for interest-only (IO) and
principal-and-interest (PI) loans using the standard annuity formula:

  payment = P · r / (1 − (1 + r)^−n)

where r is the monthly rate and n the number of monthly payments.
Inputs are trusted: callers coerce form values before calling.
"""

from __future__ import annotations

from src.schemas.affordability import MortgagePayment, MortgageType

_ZERO = MortgagePayment(payment=0.0, interest=0.0)


def monthly_to_weekly(amount: float) -> float:
    """Convert a monthly amount to its weekly equivalent."""
    return amount * 12 / 52


def compute_payment(
    principal: float,
    annual_rate_percent: float,
    term_years: float,
    mortgage_type: MortgageType = MortgageType.PI,
) -> MortgagePayment:
    """Calculate the monthly repayment on a loan.

    Args:
        principal: Loan amount in dollars.
        annual_rate_percent: Nominal annual rate, e.g. 6.5 for 6.5%.
        term_years: Loan term in years (ignored for IO loans).
        mortgage_type: IO or PI.

    Returns:
        MortgagePayment with the monthly payment and first-month interest.
    """
    if principal <= 0:
        return _ZERO

    num_payments = term_years * 12
    if annual_rate_percent == 0:
        if num_payments <= 0:
            return _ZERO
        return MortgagePayment(payment=principal / num_payments, interest=0.0)

    monthly_rate = annual_rate_percent / 100 / 12
    monthly_interest = principal * monthly_rate

    if mortgage_type == MortgageType.IO:
        # Principal never amortizes
        return MortgagePayment(payment=monthly_interest, interest=monthly_interest)

    if num_payments <= 0:
        return _ZERO
    # Negative power underflows to 0 for very long terms: payment → interest only
    discount = 1 - (1 + monthly_rate) ** -num_payments
    if discount == 0:
        return MortgagePayment(payment=principal / num_payments, interest=monthly_interest)
    payment = monthly_interest / discount
    return MortgagePayment(payment=payment, interest=monthly_interest)
