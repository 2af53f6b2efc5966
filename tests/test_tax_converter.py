"""Tests for the income tax converter.

Tests cover:
- Gross → net across every bracket
- Net → gross inverse, including bracket boundaries
- Bracket table consistency (cumulative tax vs forward calculation)
- Monotonicity
- Invalid and negative inputs
"""

from __future__ import annotations

import math

import pytest

from src.calculators.tax import (
    TAX_BRACKETS,
    InvalidInput,
    build_brackets,
    gross_to_net,
    income_tax,
    net_to_gross,
)


class TestGrossToNet:
    """Test the forward (reference) direction."""

    def test_zero(self) -> None:
        assert gross_to_net(0) == 0

    def test_tax_free_threshold(self) -> None:
        """Top of the 0% bracket is untaxed."""
        assert gross_to_net(18_200) == 18_200

    def test_second_bracket(self) -> None:
        """$30,000 → 16% on $11,800 = $1,888 tax."""
        assert gross_to_net(30_000) == pytest.approx(28_112)

    def test_third_bracket(self) -> None:
        """$100,000 → $4,288 + 30% on $55,000 = $20,788 tax."""
        assert gross_to_net(100_000) == pytest.approx(79_212)

    def test_top_bracket(self) -> None:
        """$250,000 → $51,638 + 45% on $60,000 = $78,638 tax."""
        assert gross_to_net(250_000) == pytest.approx(171_362)

    def test_negative_clamps_to_zero(self) -> None:
        assert gross_to_net(-5_000) == 0

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(InvalidInput):
            gross_to_net(value)

    def test_non_numeric_raises(self) -> None:
        with pytest.raises(InvalidInput):
            gross_to_net("abc")  # type: ignore[arg-type]

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            gross_to_net(math.nan)


class TestNetToGross:
    """Test the inverse direction."""

    def test_zero(self) -> None:
        assert net_to_gross(0) == 0

    def test_tax_free_range_passes_through(self) -> None:
        assert net_to_gross(12_000) == 12_000
        assert net_to_gross(18_200) == 18_200

    def test_negative_clamps_to_zero(self) -> None:
        assert net_to_gross(-1) == 0

    def test_default_household_income(self) -> None:
        """$61,984 net sits in the 30% bracket: (61984 + 4288 − 13500) / 0.7."""
        assert net_to_gross(61_984) == pytest.approx(52_772 / 0.7)

    def test_top_bracket(self) -> None:
        assert net_to_gross(171_362) == pytest.approx(250_000)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(InvalidInput):
            net_to_gross(value)

    @pytest.mark.parametrize(
        "gross",
        [0, 18_200, 18_200.01, 30_000, 45_000, 75_388.57, 135_000, 150_000, 190_000, 1_000_000],
    )
    def test_inverts_gross_to_net(self, gross: float) -> None:
        assert net_to_gross(gross_to_net(gross)) == pytest.approx(gross, rel=1e-6, abs=1e-6)

    @pytest.mark.parametrize("net", [0, 5_000, 18_200, 40_000, 61_984, 120_000, 160_000, 400_000])
    def test_gross_to_net_recovers_net(self, net: float) -> None:
        assert gross_to_net(net_to_gross(net)) == pytest.approx(net, rel=1e-6, abs=1e-6)


class TestMonotonicity:
    """Both directions never decrease."""

    def test_gross_to_net_non_decreasing(self) -> None:
        values = [gross_to_net(g) for g in range(0, 300_001, 2_500)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_net_to_gross_non_decreasing(self) -> None:
        values = [net_to_gross(n) for n in range(0, 200_001, 2_500)]
        assert all(a <= b for a, b in zip(values, values[1:]))


class TestBracketTable:
    """The precomputed table must agree with the forward calculation."""

    def test_cumulative_tax_values(self) -> None:
        assert [b.cumulative_tax_below for b in TAX_BRACKETS] == pytest.approx(
            [0, 0, 4_288, 31_288, 51_638]
        )

    def test_cumulative_tax_matches_income_tax(self) -> None:
        for bracket in TAX_BRACKETS:
            assert bracket.cumulative_tax_below == pytest.approx(income_tax(bracket.lower))

    def test_contiguous_and_unbounded(self) -> None:
        for below, above in zip(TAX_BRACKETS, TAX_BRACKETS[1:]):
            assert below.upper == above.lower
            assert below.rate <= above.rate
        assert TAX_BRACKETS[0].lower == 0
        assert math.isinf(TAX_BRACKETS[-1].upper)

    def test_gap_rejected(self) -> None:
        with pytest.raises(ValueError, match="gap"):
            build_brackets(((0, 10_000, 0.0), (12_000, math.inf, 0.2)))

    def test_decreasing_rate_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not decrease"):
            build_brackets(((0, 10_000, 0.2), (10_000, math.inf, 0.1)))

    def test_bounded_top_rejected(self) -> None:
        with pytest.raises(ValueError, match="unbounded"):
            build_brackets(((0, 10_000, 0.0), (10_000, 20_000, 0.1)))

    def test_custom_schedule(self) -> None:
        """Flat 10% above $10k: $30k net → $32,222.22 gross."""
        brackets = build_brackets(((0, 10_000, 0.0), (10_000, math.inf, 0.1)))
        assert net_to_gross(30_000, brackets) == pytest.approx(29_000 / 0.9)
        assert gross_to_net(29_000 / 0.9, brackets) == pytest.approx(30_000)
