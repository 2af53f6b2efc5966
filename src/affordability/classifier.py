"""Affordability percentage → severity bucket.

Thresholds (share of gross income spent on housing):
  ≤ 20%  → VERY_AFFORDABLE  (well below the 30% rule)
  21–30% → AFFORDABLE       (at the 30% rule limit)
  31–40% → MODERATE         (moderate housing stress)
  41–50% → HIGH             (high housing stress)
  > 50%  → SEVERE           (severe housing stress)

A negative weekly leftover overrides the percentage: the household cannot
cover living costs plus housing, so the postcode is CRITICAL however
low the ratio is.
"""

from __future__ import annotations

import math

from src.schemas.affordability import AffordabilityBucket

BUCKET_COLORS: dict[AffordabilityBucket, str] = {
    AffordabilityBucket.VERY_AFFORDABLE: "#16a34a",
    AffordabilityBucket.AFFORDABLE: "#22c55e",
    AffordabilityBucket.MODERATE: "#fbbf24",
    AffordabilityBucket.HIGH: "#f97316",
    AffordabilityBucket.SEVERE: "#ef4444",
    AffordabilityBucket.CRITICAL: "#000000",
    AffordabilityBucket.NO_DATA: "#ccc",
}

BUCKET_LABELS: dict[AffordabilityBucket, str] = {
    AffordabilityBucket.VERY_AFFORDABLE: "≤ 20% (Well Below 30% Rule)",
    AffordabilityBucket.AFFORDABLE: "21-30% (At 30% Rule Limit)",
    AffordabilityBucket.MODERATE: "31-40% (Moderate Housing Stress)",
    AffordabilityBucket.HIGH: "41-50% (High Housing Stress)",
    AffordabilityBucket.SEVERE: "> 50% (Severe Housing Stress)",
    AffordabilityBucket.CRITICAL: "Negative leftover",
    AffordabilityBucket.NO_DATA: "No Data",
}


def classify(percentage: float | None, leftover: float | None = None) -> AffordabilityBucket:
    """Classify an affordability percentage into a severity bucket."""
    if leftover is not None and leftover < 0:
        return AffordabilityBucket.CRITICAL
    if percentage is None or math.isnan(percentage) or percentage == 0:
        return AffordabilityBucket.NO_DATA
    if percentage <= 20:
        return AffordabilityBucket.VERY_AFFORDABLE
    if percentage <= 30:
        return AffordabilityBucket.AFFORDABLE
    if percentage <= 40:
        return AffordabilityBucket.MODERATE
    if percentage <= 50:
        return AffordabilityBucket.HIGH
    return AffordabilityBucket.SEVERE


def bucket_color(bucket: AffordabilityBucket) -> str:
    """Fill colour for a bucket."""
    return BUCKET_COLORS[bucket]


def legend() -> list[tuple[AffordabilityBucket, str, str]]:
    """Legend rows, best to worst, with negative leftover and no data last."""
    return [(bucket, BUCKET_COLORS[bucket], BUCKET_LABELS[bucket]) for bucket in AffordabilityBucket]
