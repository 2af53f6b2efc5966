"""Pydantic schemas for the affordability calculators and engine.

Pure data classes. Raw postcode statistics and household settings go in,
derived per-postcode results come out. Raw inputs are coerced defensively
because they usually come straight from form fields or CSV cells.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from src.config import settings

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class HousingMode(str, Enum):
    """Whether the household rents or buys."""

    RENT = "rent"
    BUY = "buy"


class DepositMode(str, Enum):
    """How the purchase deposit is expressed."""

    PERCENT = "percent"
    AMOUNT = "amount"


class MortgageType(str, Enum):
    """Mortgage repayment type."""

    IO = "IO"  # interest only
    PI = "PI"  # principal and interest


class PriceMode(str, Enum):
    """Price point (percentile) used for rents and sales."""

    Q1 = "q1"
    MEDIAN = "median"
    Q3 = "q3"


class AffordabilityBucket(str, Enum):
    """Severity bucket for a postcode's affordability."""

    VERY_AFFORDABLE = "very_affordable"  # ≤ 20%
    AFFORDABLE = "affordable"            # ≤ 30%
    MODERATE = "moderate"                # ≤ 40%
    HIGH = "high"                        # ≤ 50%
    SEVERE = "severe"                    # > 50%
    CRITICAL = "critical"                # negative leftover
    NO_DATA = "no_data"


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def to_number(value: Any) -> float | None:
    """Parse a raw form/CSV value into a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


# ---------------------------------------------------------------------------
# Constant tables
# ---------------------------------------------------------------------------


class TaxBracket(BaseModel):
    """One bracket of a progressive income tax schedule."""

    model_config = ConfigDict(frozen=True)

    lower: float
    upper: float                       # math.inf for the top bracket
    rate: float                        # e.g. 0.30
    cumulative_tax_below: float        # tax owed on income up to `lower`


class DefaultStatistic(BaseModel):
    """An ABS-sourced figure that is inflation-adjusted once at start-up."""

    model_config = ConfigDict(frozen=True)

    base: float
    base_year: int
    target_year: int
    label: str


# ---------------------------------------------------------------------------
# Household settings
# ---------------------------------------------------------------------------


class HouseholdSettings(BaseModel):
    """User-supplied household figures, re-read on every recompute.

    Amounts are weekly unless the name says otherwise. Missing or
    non-finite values become 0; mortgage inputs fall back to the
    configured market defaults instead.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Income
    net_annual_income: float = 0.0

    # Weekly living costs
    utilities: float = 0.0
    food: float = 0.0
    transport: float = 0.0
    other: float = 0.0

    # Housing choice
    housing_mode: HousingMode = HousingMode.RENT
    deposit_mode: DepositMode = DepositMode.PERCENT
    mortgage_type: MortgageType = MortgageType.PI

    # Mortgage
    interest_rate: float = Field(default_factory=lambda: settings.mortgage.default_interest_rate)
    loan_term: float = Field(default_factory=lambda: float(settings.mortgage.default_loan_term))
    deposit_percent: float = Field(default_factory=lambda: settings.mortgage.default_deposit_percent)
    deposit_amount: float = 0.0

    # Weekly owner costs (buy mode only)
    strata: float = 0.0
    council: float = 0.0
    water: float = 0.0
    maintenance: float = 0.0

    @field_validator(
        "net_annual_income",
        "utilities",
        "food",
        "transport",
        "other",
        "deposit_amount",
        "strata",
        "council",
        "water",
        "maintenance",
        mode="before",
    )
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        """Unparsable or non-finite amounts count as zero."""
        number = to_number(v)
        return 0.0 if number is None else number

    @field_validator("interest_rate", mode="before")
    @classmethod
    def coerce_interest_rate(cls, v: Any) -> float:
        number = to_number(v)
        return settings.mortgage.default_interest_rate if number is None else number

    @field_validator("deposit_percent", mode="before")
    @classmethod
    def coerce_deposit_percent(cls, v: Any) -> float:
        number = to_number(v)
        return settings.mortgage.default_deposit_percent if number is None else number

    @field_validator("loan_term", mode="before")
    @classmethod
    def coerce_loan_term(cls, v: Any) -> float:
        """A term of zero or less cannot amortize, use the default term."""
        number = to_number(v)
        if number is None or number <= 0:
            return float(settings.mortgage.default_loan_term)
        return number

    @property
    def weekly_net_income(self) -> float:
        return self.net_annual_income / 52

    @property
    def weekly_living_costs(self) -> float:
        return self.utilities + self.food + self.transport + self.other

    @property
    def weekly_owner_costs(self) -> float:
        return self.strata + self.council + self.water + self.maintenance


# ---------------------------------------------------------------------------
# Postcode statistics (raw input)
# ---------------------------------------------------------------------------


class PostcodeStats(BaseModel):
    """Raw rent and sales statistics for one postcode.

    Accepts both the short field names and the column names of the
    aggregated yearly dataset. Sales prices are in thousands of dollars.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    postcode: str = Field(validation_alias=AliasChoices("postcode", "Postcode"))
    median_weekly_rent: float | None = Field(
        default=None,
        validation_alias=AliasChoices("median_weekly_rent", "yearly_median_weekly_rent"),
    )
    q1_weekly_rent: float | None = Field(
        default=None,
        validation_alias=AliasChoices("q1_weekly_rent", "yearly_first_quartile_weekly_rent"),
    )
    q3_weekly_rent: float | None = Field(
        default=None,
        validation_alias=AliasChoices("q3_weekly_rent", "yearly_third_quartile_weekly_rent"),
    )
    median_sales_000s: float | None = Field(
        default=None,
        validation_alias=AliasChoices("median_sales_000s", "yearly_median_sales_price_000s"),
    )
    q1_sales_000s: float | None = Field(
        default=None,
        validation_alias=AliasChoices("q1_sales_000s", "yearly_first_quartile_sales_000s"),
    )
    q3_sales_000s: float | None = Field(
        default=None,
        validation_alias=AliasChoices("q3_sales_000s", "yearly_third_quartile_sales_000s"),
    )

    @field_validator("postcode", mode="before")
    @classmethod
    def coerce_postcode(cls, v: Any) -> str:
        return str(v).strip()

    @field_validator(
        "median_weekly_rent",
        "q1_weekly_rent",
        "q3_weekly_rent",
        "median_sales_000s",
        "q1_sales_000s",
        "q3_sales_000s",
        mode="before",
    )
    @classmethod
    def coerce_statistic(cls, v: Any) -> float | None:
        """Empty cells and non-numeric values mean no data."""
        return to_number(v)

    def weekly_rent(self, mode: PriceMode) -> float | None:
        """Weekly rent at the given price point."""
        if mode == PriceMode.Q1:
            return self.q1_weekly_rent
        if mode == PriceMode.Q3:
            return self.q3_weekly_rent
        return self.median_weekly_rent

    def sales_price(self, mode: PriceMode) -> float:
        """Sales price in dollars at the given price point, 0 when unknown."""
        if mode == PriceMode.Q1:
            thousands = self.q1_sales_000s
        elif mode == PriceMode.Q3:
            thousands = self.q3_sales_000s
        else:
            thousands = self.median_sales_000s
        return (thousands or 0.0) * 1000


# ---------------------------------------------------------------------------
# Calculator / engine outputs
# ---------------------------------------------------------------------------


class MortgagePayment(BaseModel):
    """Monthly mortgage repayment figures."""

    payment: float
    interest: float                    # first-period interest, not lifetime total


class IncomeBreakdown(BaseModel):
    """Household income figures shared by every postcode in a pass."""

    net_annual_income: float
    gross_annual_income: float
    weekly_net_income: float
    weekly_gross_income: float
    max_weekly_housing: float          # threshold share of weekly gross
    weekly_living_costs: float
    weekly_owner_costs: float
    weekly_after_expenses: float       # net minus living costs


class AffordabilityResult(BaseModel):
    """Derived affordability figures for one postcode."""

    postcode: str
    price_mode: PriceMode
    weekly_housing_cost: float = 0.0
    affordability_percentage: float | None = 0.0   # None: no income signal
    is_affordable: bool = False
    weekly_money_leftover: float | None = None     # None: cost unknown
    bucket: AffordabilityBucket = AffordabilityBucket.NO_DATA

    # Buy mode only
    weekly_mortgage_payment: float | None = None
    weekly_mortgage_interest: float | None = None

    # Quartile comparison, independent of price mode
    q1_weekly_rent: float | None = None
    q3_weekly_rent: float | None = None
    q1_weekly_purchase_payment: float | None = None
    q3_weekly_purchase_payment: float | None = None


class RentBuyComparison(BaseModel):
    """Side-by-side weekly rent and purchase figures for one postcode."""

    postcode: str
    price_mode: PriceMode
    sale_price: float | None = None
    weekly_rent: float | None = None
    leftover_after_rent: float | None = None
    weekly_mortgage_cost: float | None = None
    weekly_owner_costs: float | None = None
    total_weekly_buy_cost: float | None = None
    leftover_after_buy: float | None = None
