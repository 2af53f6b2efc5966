"""Tests for display formatters."""

from __future__ import annotations

import pytest

from src.affordability.formatters import (
    format_currency,
    format_percentage,
    format_sale_price,
    percentile_label,
    price_point_label,
)
from src.schemas.affordability import PriceMode


class TestFormatCurrency:
    def test_whole_dollars(self) -> None:
        assert format_currency(1234.5) == "$1,235"

    def test_negative(self) -> None:
        assert format_currency(-195.4) == "-$195"

    def test_none(self) -> None:
        assert format_currency(None) == "N/A"

    def test_huge_value(self) -> None:
        assert format_currency(1e30) == "$1" + ",000" * 10
        assert format_currency(-1e30) == "-$1" + ",000" * 10


class TestFormatSalePrice:
    @pytest.mark.parametrize(
        "price,expected",
        [
            (800_000, "800k"),
            (425_500, "425.5k"),
            (1_000_000, "1M"),
            (1_260_000, "1.3M"),
            (2_460_000, "2.5M"),
            (0, "N/A"),
            (None, "N/A"),
        ],
    )
    def test_formats(self, price: float | None, expected: str) -> None:
        assert format_sale_price(price) == expected


def test_format_percentage() -> None:
    assert format_percentage(31.0395) == "31.0%"
    assert format_percentage(None) == "N/A"


def test_labels() -> None:
    assert price_point_label(PriceMode.Q1) == "Below-average property (25th percentile)"
    assert price_point_label(PriceMode.MEDIAN) == "Average property (50th percentile)"
    assert percentile_label(PriceMode.Q3) == "75th percentile"
