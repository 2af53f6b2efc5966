"""Australian resident income tax: gross ↔ net annual income.

Pure Python, float arithmetic. Implements:
- Gross → net: exact forward calculation over the progressive brackets
- Net → gross: closed-form inverse, solved bracket by bracket

2024–25 resident rates (Medicare levy not included):
  $0 – $18,200         →  0%
  $18,200 – $45,000    → 16%
  $45,000 – $135,000   → 30%
  $135,000 – $190,000  → 37%
  $190,000+            → 45%
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from src.schemas.affordability import TaxBracket

logger = logging.getLogger(__name__)

# (lower, upper, rate)
_SCHEDULE_2024_25: tuple[tuple[float, float, float], ...] = (
    (0, 18_200, 0.00),
    (18_200, 45_000, 0.16),
    (45_000, 135_000, 0.30),
    (135_000, 190_000, 0.37),
    (190_000, math.inf, 0.45),
)


class InvalidInput(ValueError):
    """Raised when a tax conversion receives a non-finite amount."""


def build_brackets(schedule: tuple[tuple[float, float, float], ...]) -> tuple[TaxBracket, ...]:
    """Build a bracket table with the tax owed below each lower bound.

    Raises:
        ValueError: If the schedule is not contiguous from 0 or rates decrease.
    """
    brackets: list[TaxBracket] = []
    cumulative = 0.0
    expected_lower = 0.0
    previous_rate = 0.0
    for lower, upper, rate in schedule:
        if lower != expected_lower:
            msg = f"Tax schedule gap at {expected_lower}: next bracket starts at {lower}"
            raise ValueError(msg)
        if not 0 <= rate < 1:
            msg = f"Tax rate must be in [0, 1), got {rate}"
            raise ValueError(msg)
        if rate < previous_rate:
            msg = f"Tax rates must not decrease (bracket starting at {lower})"
            raise ValueError(msg)
        brackets.append(
            TaxBracket(lower=lower, upper=upper, rate=rate, cumulative_tax_below=cumulative)
        )
        if math.isfinite(upper):
            cumulative += (upper - lower) * rate
        expected_lower = upper
        previous_rate = rate
    if math.isfinite(expected_lower):
        msg = "Top tax bracket must be unbounded"
        raise ValueError(msg)
    return tuple(brackets)


TAX_BRACKETS: tuple[TaxBracket, ...] = build_brackets(_SCHEDULE_2024_25)


@dataclass(frozen=True)
class BracketMatch:
    """Outcome of trying to place a net income inside one bracket."""

    found: bool
    gross: float
    bracket: TaxBracket


def _require_finite(value: float, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} must be a finite number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidInput(f"{name} must be a finite number, got {value!r}")
    return number


def income_tax(gross: float, brackets: tuple[TaxBracket, ...] = TAX_BRACKETS) -> float:
    """Tax owed on a gross annual income.

    Raises:
        InvalidInput: If gross is not a finite number.
    """
    gross = max(0.0, _require_finite(gross, "gross"))
    tax = 0.0
    for bracket in brackets:
        if gross > bracket.lower:
            taxable = min(gross, bracket.upper) - bracket.lower
            tax += taxable * bracket.rate
    return tax


def gross_to_net(gross: float, brackets: tuple[TaxBracket, ...] = TAX_BRACKETS) -> float:
    """Convert gross annual income to net (after income tax).

    Negative incomes clamp to 0.

    Raises:
        InvalidInput: If gross is not a finite number.
    """
    gross = max(0.0, _require_finite(gross, "gross"))
    return gross - income_tax(gross, brackets)


def _solve_in_bracket(net: float, bracket: TaxBracket, is_top: bool) -> BracketMatch:
    """Solve net = gross - tax(gross) assuming gross lies in this bracket."""
    gross = (net + bracket.cumulative_tax_below - bracket.rate * bracket.lower) / (1 - bracket.rate)
    in_range = gross >= bracket.lower and (is_top or gross < bracket.upper)
    return BracketMatch(found=in_range, gross=gross, bracket=bracket)


def net_to_gross(net: float, brackets: tuple[TaxBracket, ...] = TAX_BRACKETS) -> float:
    """Convert net annual income back to the gross income that produces it.

    Inverse of gross_to_net. Negative incomes clamp to 0.

    Raises:
        InvalidInput: If net is not a finite number.
    """
    net = _require_finite(net, "net")
    if net < 0:
        return 0.0
    # Tax-free threshold: net equals gross
    if net <= brackets[0].upper:
        return net

    last = len(brackets) - 1
    for i in range(1, len(brackets)):
        match = _solve_in_bracket(net, brackets[i], is_top=i == last)
        if match.found:
            return match.gross

    logger.warning("No tax bracket matched net income %.2f, using top bracket", net)
    return _solve_in_bracket(net, brackets[last], is_top=True).gross
