"""Command-line entry point — one affordability pass over a postcode CSV.

Usage:
    python -m src.main data/aggregated_yearly_data.csv --mode buy --price-point q1

Reads the aggregated yearly statistics, recomputes every postcode with the
default household (optionally overriding income and housing mode) and logs
how many postcodes fall in each bucket plus the least affordable ones.
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from src.affordability import (
    PostcodeStats,
    PriceMode,
    bucket_counts,
    default_household_settings,
    recompute_all,
)
from src.affordability.classifier import BUCKET_LABELS
from src.affordability.engine import income_breakdown
from src.affordability.formatters import format_currency, format_percentage, price_point_label
from src.config import settings
from src.schemas.affordability import HousingMode

# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


logger = structlog.get_logger(__name__)

# ── Data loading ─────────────────────────────────────────────────────


def load_postcode_stats(path: Path) -> list[PostcodeStats]:
    """Parse the aggregated CSV; rows without a postcode are skipped."""
    records: list[PostcodeStats] = []
    with open(path, encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            postcode = (row.get("Postcode") or row.get("postcode") or "").strip()
            if not postcode or postcode == "null":
                continue
            try:
                records.append(PostcodeStats.model_validate(row))
            except ValidationError:
                logger.warning("skipping malformed row", postcode=postcode)
    return records


# ── CLI ──────────────────────────────────────────────────────────────


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Housing affordability by postcode")
    parser.add_argument("data", type=Path, help="Aggregated yearly postcode statistics (CSV)")
    parser.add_argument(
        "--price-point",
        choices=[mode.value for mode in PriceMode],
        default=settings.affordability.default_price_mode,
    )
    parser.add_argument("--mode", choices=[mode.value for mode in HousingMode], default="rent")
    parser.add_argument("--income", type=float, default=None, help="Annual net household income")
    parser.add_argument("--top", type=int, default=5, help="Least affordable postcodes to list")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging()

    try:
        records = load_postcode_stats(args.data)
    except OSError as exc:
        logger.error("cannot read postcode data", path=str(args.data), error=str(exc))
        return 1

    household = default_household_settings()
    household.housing_mode = HousingMode(args.mode)
    if args.income is not None:
        household.net_annual_income = args.income
    price_mode = PriceMode(args.price_point)

    income = income_breakdown(household)
    logger.info(
        "household",
        weekly_net=format_currency(income.weekly_net_income),
        weekly_gross=format_currency(income.weekly_gross_income),
        max_weekly_housing=format_currency(income.max_weekly_housing),
    )

    results = recompute_all(records, household, price_mode)
    logger.info(
        "recomputed",
        postcodes=len(results),
        mode=household.housing_mode.value,
        price_point=price_point_label(price_mode),
    )
    for bucket, count in bucket_counts(results).items():
        logger.info("bucket", bucket=BUCKET_LABELS[bucket], postcodes=count)

    ranked = sorted(
        (r for r in results.values() if r.affordability_percentage),
        key=lambda r: r.affordability_percentage,
        reverse=True,
    )
    for result in ranked[: args.top]:
        logger.info(
            "least affordable",
            postcode=result.postcode,
            share=format_percentage(result.affordability_percentage),
            weekly_cost=format_currency(result.weekly_housing_cost),
            leftover=format_currency(result.weekly_money_leftover),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
