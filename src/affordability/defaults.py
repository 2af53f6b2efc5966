"""Default household figures seeded from ABS statistics.

Base values come from ABS publications and are rolled forward with
compound CPI (see src.calculators.inflation) to current dollars:
- Household income: ABS median equivalised disposable household income
  (Measuring What Matters, 2022-23: $1,192/week)
- Living costs: ABS Household Expenditure Survey 2019-20, weekly
Mortgage and owner-cost defaults come from configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from src.affordability.formatters import format_currency
from src.calculators.inflation import INFLATION_RATES, adjust_statistic
from src.calculators.tax import net_to_gross
from src.config import settings
from src.schemas.affordability import DefaultStatistic, HouseholdSettings

DEFAULT_STATISTICS: Mapping[str, DefaultStatistic] = MappingProxyType(
    {
        "net_annual_income": DefaultStatistic(
            base=61_984,
            base_year=2022,
            target_year=2025,
            label="ABS median equivalised disposable household income",
        ),
        "utilities": DefaultStatistic(
            base=46,
            base_year=2019,
            target_year=2024,
            label="ABS HES 2019-20 utilities expenditure",
        ),
        "food": DefaultStatistic(
            base=92,
            base_year=2019,
            target_year=2024,
            label="ABS HES 2019-20 food & groceries expenditure",
        ),
        "transport": DefaultStatistic(
            base=69,
            base_year=2019,
            target_year=2024,
            label="ABS HES 2019-20 transport expenditure",
        ),
    }
)


def default_values(series: Mapping[int, float] = INFLATION_RATES) -> dict[str, int]:
    """Inflation-adjusted value of every default statistic, keyed by field."""
    return {field: adjust_statistic(stat, series) for field, stat in DEFAULT_STATISTICS.items()}


def default_household_settings(series: Mapping[int, float] = INFLATION_RATES) -> HouseholdSettings:
    """Household settings pre-filled with current-dollar defaults."""
    mortgage = settings.mortgage
    owner = settings.owner_costs
    return HouseholdSettings(
        **default_values(series),
        other=0.0,
        interest_rate=mortgage.default_interest_rate,
        loan_term=mortgage.default_loan_term,
        deposit_percent=mortgage.default_deposit_percent,
        deposit_amount=mortgage.default_deposit_amount,
        strata=owner.default_strata,
        council=owner.default_council,
        water=owner.default_water,
        maintenance=owner.default_maintenance,
    )


def describe_default(stat: DefaultStatistic, series: Mapping[int, float] = INFLATION_RATES) -> str:
    """Helper text shown beside an input that was seeded from a statistic."""
    adjusted = adjust_statistic(stat, series)
    return (
        f"Default: ${adjusted:,} ({stat.label} {stat.base_year}-{stat.base_year + 1}, "
        "adjusted for inflation)"
    )


def describe_income_default(
    stat: DefaultStatistic = DEFAULT_STATISTICS["net_annual_income"],
    series: Mapping[int, float] = INFLATION_RATES,
) -> str:
    """Helper text for the net income input, with the gross income it implies."""
    adjusted = adjust_statistic(stat, series)
    return (
        f"Default net: {format_currency(adjusted)} ({stat.label} "
        f"{stat.base_year}-{stat.base_year + 1}, inflation-adjusted). "
        f"Estimated gross: {format_currency(net_to_gross(adjusted))}."
    )
