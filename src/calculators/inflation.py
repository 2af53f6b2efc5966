"""Compound inflation adjustment for default statistics.

Pure Python. Used once at start-up to roll ABS base figures forward to
current-dollar defaults; the affordability math itself never calls it.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType

from src.schemas.affordability import DefaultStatistic

# ABS CPI by financial year, percent (2020 = 2020-21)
INFLATION_RATES: Mapping[int, float] = MappingProxyType(
    {
        2020: 0.9,
        2021: 2.9,
        2022: 6.6,
        2023: 5.6,
        2024: 3.16,
        2025: 2.10,  # projected
    }
)


def _to_dollars(value: float) -> int:
    """Round half away from zero to whole dollars."""
    with localcontext() as ctx:
        # Enough digits for any finite float
        ctx.prec = 400
        return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def adjust_for_inflation(
    base: float,
    base_year: int,
    target_year: int,
    series: Mapping[int, float] = INFLATION_RATES,
) -> int:
    """Compound a base-year value forward to the target year.

    Args:
        base: Value in base-year dollars.
        base_year: Year the value was measured. Its own rate is not applied.
        target_year: Year to express the value in (inclusive).
        series: Year → annual inflation rate in percent. Missing years are skipped.

    Returns:
        The adjusted value rounded to whole dollars. `base` (rounded) when
        target_year <= base_year.
    """
    adjusted = base
    for year in range(base_year + 1, target_year + 1):
        rate = series.get(year)
        if rate:
            adjusted *= 1 + rate / 100
    return _to_dollars(adjusted)


def adjust_statistic(
    stat: DefaultStatistic,
    series: Mapping[int, float] = INFLATION_RATES,
) -> int:
    """Inflation-adjust a DefaultStatistic to its target year."""
    return adjust_for_inflation(stat.base, stat.base_year, stat.target_year, series)
