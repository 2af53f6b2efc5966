"""Display formatting for affordability figures (en-AU).

Used by whatever renders results; none of these feed back into the math.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.schemas.affordability import PriceMode

_PRICE_POINT_LABELS: dict[PriceMode, str] = {
    PriceMode.Q1: "Below-average property (25th percentile)",
    PriceMode.MEDIAN: "Average property (50th percentile)",
    PriceMode.Q3: "Above-average property (75th percentile)",
}

_PERCENTILE_LABELS: dict[PriceMode, str] = {
    PriceMode.Q1: "25th percentile",
    PriceMode.MEDIAN: "50th percentile",
    PriceMode.Q3: "75th percentile",
}


def format_currency(value: float | int | None) -> str:
    """Format as whole Australian dollars: -1234.5 -> "-$1,235"."""
    if value is None:
        return "N/A"
    with localcontext() as ctx:
        # Enough digits for any finite float
        ctx.prec = 400
        dollars = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        sign = "-" if dollars < 0 else ""
        return f"{sign}${abs(dollars):,}"


def format_percentage(value: float | None) -> str:
    """Format an affordability percentage: 31.04 -> "31.0%"."""
    if value is None:
        return "N/A"
    return f"{value:.1f}%"


def format_sale_price(price: float | None) -> str:
    """Compact sale price: 1_260_000 -> "1.3M", 1_000_000 -> "1M", 800_000 -> "800k"."""
    if price is None or price <= 0:
        return "N/A"
    if price >= 1_000_000:
        return f"{price / 1_000_000:.1f}".replace(".0", "") + "M"
    thousands = price / 1000
    if thousands == int(thousands):
        return f"{int(thousands):,}k"
    return f"{thousands:,}k"


def price_point_label(mode: PriceMode) -> str:
    return _PRICE_POINT_LABELS[mode]


def percentile_label(mode: PriceMode) -> str:
    return _PERCENTILE_LABELS[mode]
