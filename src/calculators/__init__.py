"""Financial calculators: income tax, mortgage repayments, inflation."""

from src.calculators.inflation import INFLATION_RATES, adjust_for_inflation, adjust_statistic
from src.calculators.mortgage import compute_payment, monthly_to_weekly
from src.calculators.tax import (
    TAX_BRACKETS,
    InvalidInput,
    gross_to_net,
    income_tax,
    net_to_gross,
)

__all__ = [
    "INFLATION_RATES",
    "TAX_BRACKETS",
    "InvalidInput",
    "adjust_for_inflation",
    "adjust_statistic",
    "compute_payment",
    "gross_to_net",
    "income_tax",
    "monthly_to_weekly",
    "net_to_gross",
]
