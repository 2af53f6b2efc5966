"""Affordability engine — per-postcode housing cost against household income.

Pure Python orchestrator. No file access, no state between calls: every
pass recomputes every postcode from the raw statistics and the current
household settings, and returns new result objects keyed by postcode.

Per postcode:
  1. Pick rent / sales price for the price point (q1, median, q3)
  2. Weekly housing cost: rent, or mortgage repayment + owner costs
  3. Affordability % = weekly cost / weekly gross income × 100
  4. Leftover = weekly net − living costs − weekly cost
  5. Bucket via the classifier (negative leftover wins)
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from src.affordability.classifier import classify
from src.calculators.mortgage import compute_payment, monthly_to_weekly
from src.calculators.tax import InvalidInput, net_to_gross
from src.config import settings
from src.schemas.affordability import (
    AffordabilityBucket,
    AffordabilityResult,
    DepositMode,
    HouseholdSettings,
    HousingMode,
    IncomeBreakdown,
    MortgagePayment,
    PostcodeStats,
    PriceMode,
    RentBuyComparison,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def income_breakdown(household: HouseholdSettings) -> IncomeBreakdown:
    """Household-level income figures, shared by every postcode in a pass.

    Gross income is derived once from the annual net figure, then divided
    into weeks.

    Raises:
        InvalidInput: If the net income cannot be converted.
    """
    gross_annual = net_to_gross(household.net_annual_income)
    weekly_gross = gross_annual / 52
    weekly_net = household.weekly_net_income
    threshold = settings.affordability.affordability_threshold
    return IncomeBreakdown(
        net_annual_income=household.net_annual_income,
        gross_annual_income=gross_annual,
        weekly_net_income=weekly_net,
        weekly_gross_income=weekly_gross,
        max_weekly_housing=weekly_gross * threshold / 100,
        weekly_living_costs=household.weekly_living_costs,
        weekly_owner_costs=household.weekly_owner_costs,
        weekly_after_expenses=weekly_net - household.weekly_living_costs,
    )


def _mortgage_for_price(price: float, household: HouseholdSettings) -> MortgagePayment:
    """Monthly repayment on a purchase at `price` with the household's deposit."""
    if household.deposit_mode == DepositMode.PERCENT:
        deposit = price * household.deposit_percent / 100
    else:
        deposit = household.deposit_amount
    loan = max(0.0, price - deposit)
    return compute_payment(loan, household.interest_rate, household.loan_term, household.mortgage_type)


def _weekly_purchase_cost(price: float, household: HouseholdSettings) -> float | None:
    """Weekly repayment plus owner costs, None when the price is unknown."""
    if price <= 0:
        return None
    mortgage = _mortgage_for_price(price, household)
    return monthly_to_weekly(mortgage.payment) + household.weekly_owner_costs


def _no_data(stats: PostcodeStats, price_mode: PriceMode) -> AffordabilityResult:
    return AffordabilityResult(
        postcode=stats.postcode,
        price_mode=price_mode,
        affordability_percentage=None,
        q1_weekly_rent=stats.q1_weekly_rent,
        q3_weekly_rent=stats.q3_weekly_rent,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_affordability(
    stats: PostcodeStats,
    household: HouseholdSettings,
    price_mode: PriceMode = PriceMode.MEDIAN,
    income: IncomeBreakdown | None = None,
) -> AffordabilityResult:
    """Compute affordability for a single postcode.

    Args:
        stats: Raw rent and sales statistics for the postcode.
        household: Current household settings.
        price_mode: Price point to compare against.
        income: Precomputed income breakdown; derived from `household` when None.

    Returns:
        AffordabilityResult. With no income signal (gross ≤ 0) the
        percentage is None and the bucket NO_DATA.

    Raises:
        InvalidInput: If the household income cannot be converted.
    """
    if income is None:
        income = income_breakdown(household)

    rent = stats.weekly_rent(price_mode)
    price = stats.sales_price(price_mode)

    weekly_cost = 0.0
    weekly_payment: float | None = None
    weekly_interest: float | None = None

    if household.housing_mode == HousingMode.RENT and rent is not None and rent > 0:
        weekly_cost = rent
    elif household.housing_mode == HousingMode.BUY and price > 0:
        mortgage = _mortgage_for_price(price, household)
        weekly_payment = monthly_to_weekly(mortgage.payment)
        weekly_interest = monthly_to_weekly(mortgage.interest)
        weekly_cost = weekly_payment + household.weekly_owner_costs

    leftover = income.weekly_after_expenses - weekly_cost if weekly_cost > 0 else None

    percentage: float | None
    if income.weekly_gross_income <= 0:
        # No income signal: never divide, never classify
        percentage = None
        is_affordable = False
        bucket = AffordabilityBucket.NO_DATA
    else:
        percentage = weekly_cost / income.weekly_gross_income * 100
        is_affordable = percentage <= settings.affordability.affordability_threshold
        bucket = classify(percentage, leftover)

    return AffordabilityResult(
        postcode=stats.postcode,
        price_mode=price_mode,
        weekly_housing_cost=weekly_cost,
        affordability_percentage=percentage,
        is_affordable=is_affordable,
        weekly_money_leftover=leftover,
        bucket=bucket,
        weekly_mortgage_payment=weekly_payment,
        weekly_mortgage_interest=weekly_interest,
        q1_weekly_rent=stats.q1_weekly_rent,
        q3_weekly_rent=stats.q3_weekly_rent,
        q1_weekly_purchase_payment=_weekly_purchase_cost(stats.sales_price(PriceMode.Q1), household),
        q3_weekly_purchase_payment=_weekly_purchase_cost(stats.sales_price(PriceMode.Q3), household),
    )


def recompute_all(
    records: Iterable[PostcodeStats],
    household: HouseholdSettings,
    price_mode: PriceMode = PriceMode.MEDIAN,
) -> dict[str, AffordabilityResult]:
    """Recompute affordability for every postcode from scratch.

    A conversion failure never aborts the pass: the affected postcodes
    get a no-data result instead.

    Returns:
        Results keyed by postcode, in input order.
    """
    try:
        income: IncomeBreakdown | None = income_breakdown(household)
    except InvalidInput:
        logger.warning("Household income could not be converted, all postcodes set to no data")
        income = None

    results: dict[str, AffordabilityResult] = {}
    for stats in records:
        if income is None:
            results[stats.postcode] = _no_data(stats, price_mode)
            continue
        try:
            results[stats.postcode] = compute_affordability(stats, household, price_mode, income)
        except InvalidInput:
            logger.warning("Affordability failed for postcode %s, set to no data", stats.postcode)
            results[stats.postcode] = _no_data(stats, price_mode)

    logger.debug(
        "Recomputed %d postcodes (mode=%s, price=%s)",
        len(results),
        household.housing_mode.value,
        price_mode.value,
    )
    return results


def compare_rent_and_buy(
    stats: PostcodeStats,
    household: HouseholdSettings,
    price_mode: PriceMode = PriceMode.MEDIAN,
    income: IncomeBreakdown | None = None,
) -> RentBuyComparison:
    """Weekly rent and purchase figures side by side, whatever the housing mode.

    Raises:
        InvalidInput: If the household income cannot be converted.
    """
    if income is None:
        income = income_breakdown(household)

    comparison = RentBuyComparison(postcode=stats.postcode, price_mode=price_mode)

    rent = stats.weekly_rent(price_mode)
    if rent is not None and rent > 0:
        comparison.weekly_rent = rent
        comparison.leftover_after_rent = income.weekly_after_expenses - rent

    price = stats.sales_price(price_mode)
    if price > 0:
        comparison.sale_price = price
        mortgage_cost = monthly_to_weekly(_mortgage_for_price(price, household).payment)
        if mortgage_cost > 0:
            total = mortgage_cost + household.weekly_owner_costs
            comparison.weekly_mortgage_cost = mortgage_cost
            comparison.weekly_owner_costs = household.weekly_owner_costs
            comparison.total_weekly_buy_cost = total
            comparison.leftover_after_buy = income.weekly_after_expenses - total

    return comparison


def bucket_counts(results: dict[str, AffordabilityResult]) -> dict[AffordabilityBucket, int]:
    """Number of postcodes in each bucket, every bucket present."""
    counts = Counter(result.bucket for result in results.values())
    return {bucket: counts.get(bucket, 0) for bucket in AffordabilityBucket}
