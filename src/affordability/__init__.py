"""Affordability engine — per-postcode housing affordability for a household."""

from src.affordability.classifier import BUCKET_COLORS, BUCKET_LABELS, classify, legend
from src.affordability.defaults import DEFAULT_STATISTICS, default_household_settings
from src.affordability.engine import (
    bucket_counts,
    compare_rent_and_buy,
    compute_affordability,
    income_breakdown,
    recompute_all,
)
from src.schemas.affordability import (
    AffordabilityBucket,
    AffordabilityResult,
    HouseholdSettings,
    IncomeBreakdown,
    PostcodeStats,
    PriceMode,
    RentBuyComparison,
)

__all__ = [
    "BUCKET_COLORS",
    "BUCKET_LABELS",
    "DEFAULT_STATISTICS",
    "AffordabilityBucket",
    "AffordabilityResult",
    "HouseholdSettings",
    "IncomeBreakdown",
    "PostcodeStats",
    "PriceMode",
    "RentBuyComparison",
    "bucket_counts",
    "classify",
    "compare_rent_and_buy",
    "compute_affordability",
    "default_household_settings",
    "income_breakdown",
    "legend",
    "recompute_all",
]
