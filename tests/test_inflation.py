"""Tests for compound inflation adjustment and default seeding."""

from __future__ import annotations

import pytest

from src.affordability.defaults import (
    DEFAULT_STATISTICS,
    default_household_settings,
    default_values,
    describe_default,
    describe_income_default,
)
from src.calculators.inflation import INFLATION_RATES, adjust_for_inflation, adjust_statistic
from src.schemas.affordability import DefaultStatistic, DepositMode, HousingMode, MortgageType


class TestAdjustForInflation:
    """Test compounding over a year range."""

    def test_single_year(self) -> None:
        assert adjust_for_inflation(100, 2019, 2020, {2020: 10.0}) == 110

    def test_compounds(self) -> None:
        """10% then 10% → 121, not 120."""
        assert adjust_for_inflation(100, 2019, 2021, {2020: 10.0, 2021: 10.0}) == 121

    def test_base_year_rate_not_applied(self) -> None:
        assert adjust_for_inflation(100, 2020, 2021, {2020: 50.0, 2021: 10.0}) == 110

    def test_missing_years_skipped(self) -> None:
        assert adjust_for_inflation(100, 2019, 2023, {2021: 10.0}) == 110

    def test_target_not_after_base(self) -> None:
        assert adjust_for_inflation(1_234, 2024, 2024) == 1_234
        assert adjust_for_inflation(1_234, 2024, 2020) == 1_234

    def test_rounds_half_up(self) -> None:
        """10.5 → 11 (not banker's rounding)."""
        assert adjust_for_inflation(10, 2019, 2020, {2020: 5.0}) == 11

    def test_empty_series(self) -> None:
        assert adjust_for_inflation(46, 2019, 2024, {}) == 46

    def test_abs_utilities(self) -> None:
        """$46/week (2019-20) → $55/week in 2024 dollars."""
        assert adjust_for_inflation(46, 2019, 2024) == 55

    def test_huge_value_rounds_exactly(self) -> None:
        assert adjust_for_inflation(1e30, 2020, 2020) == 10**30

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            INFLATION_RATES[2026] = 2.5  # type: ignore[index]


class TestDefaults:
    """Test ABS default seeding."""

    def test_default_values(self) -> None:
        values = default_values()
        assert values["utilities"] == 55
        assert values["food"] == 111
        assert values["transport"] == 83
        expected_income = 61_984 * 1.056 * 1.0316 * 1.021
        assert values["net_annual_income"] == round(expected_income)

    def test_household_settings_seeded(self) -> None:
        household = default_household_settings()
        assert household.net_annual_income == adjust_statistic(DEFAULT_STATISTICS["net_annual_income"])
        assert household.other == 0
        assert household.interest_rate == 6.5
        assert household.loan_term == 30
        assert household.deposit_percent == 20
        assert household.deposit_amount == 100_000
        assert household.weekly_owner_costs == 92 + 46 + 23 + 69
        assert household.housing_mode == HousingMode.RENT
        assert household.deposit_mode == DepositMode.PERCENT
        assert household.mortgage_type == MortgageType.PI

    def test_custom_series(self) -> None:
        household = default_household_settings(series={})
        assert household.utilities == 46
        assert household.net_annual_income == 61_984

    def test_describe_default(self) -> None:
        stat = DefaultStatistic(base=46, base_year=2019, target_year=2024, label="ABS utilities")
        assert describe_default(stat) == (
            "Default: $55 (ABS utilities 2019-2020, adjusted for inflation)"
        )

    def test_describe_default_thousands_separator(self) -> None:
        text = describe_default(DEFAULT_STATISTICS["net_annual_income"], series={})
        assert text.startswith("Default: $61,984 ")

    def test_describe_income_default_shows_gross(self) -> None:
        assert describe_income_default(series={}) == (
            "Default net: $61,984 (ABS median equivalised disposable household income "
            "2022-2023, inflation-adjusted). Estimated gross: $75,389."
        )
