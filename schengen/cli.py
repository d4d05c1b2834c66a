"""Command-line compliance check over a CSV of trips.

CSV header: entry_date,exit_date,country[,id]. A blank exit_date is an ongoing trip.
"""
from __future__ import annotations

import argparse
import csv
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from schengen.errors import ComplianceError
from schengen.models.risk import CalculationMode
from schengen.schemas.compliance import ComplianceConfig
from schengen.schemas.thresholds import DaysRemainingThresholds, DaysUsedThresholds
from schengen.schemas.trip import Trip
from schengen.services.compliance import compliance_from_presence
from schengen.services.dates import parse_date
from schengen.services.presence import presence_days
from schengen.services.risk import get_risk_action
from schengen.services.safe_entry import get_safe_entry_info

logger = logging.getLogger(__name__)


def read_trips_from_csv(path: str) -> list[Trip]:
    trips: list[Trip] = []
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for idx, row in enumerate(reader, start=2):
            entry_raw = (row.get("entry_date") or row.get("entry") or "").strip()
            exit_raw = (row.get("exit_date") or row.get("exit") or "").strip()
            country = (row.get("country") or "").strip()
            if not entry_raw and not exit_raw and not country:
                continue
            if not entry_raw:
                raise ValueError(f"CSV line {idx}: entry_date is required")
            trips.append(Trip(
                entry_date=parse_date(entry_raw),
                exit_date=parse_date(exit_raw) if exit_raw else None,
                country=country,
                id=(row.get("id") or "").strip() or f"line-{idx}",
            ))
    return trips


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schengen-check",
        description="Check Schengen 90/180-day compliance for a list of trips.",
    )
    parser.add_argument("--csv", dest="csv_path", required=True, help="CSV file with entry_date,exit_date,country")
    parser.add_argument(
        "--date",
        dest="reference_date",
        help="Reference date (YYYY-MM-DD). Default: today",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in CalculationMode],
        default=CalculationMode.audit.value,
        help="'audit' counts trips up to the reference date, 'planning' includes future trips",
    )
    parser.add_argument(
        "--start",
        dest="compliance_start",
        help="Compliance tracking start date (YYYY-MM-DD). Default from settings",
    )
    parser.add_argument(
        "--scheme",
        choices=["days_remaining", "days_used"],
        default="days_remaining",
        help="Risk threshold scheme",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        trips = read_trips_from_csv(args.csv_path)
        # The CLI is the caller here, so defaulting to today is its decision, not the engine's
        reference_date = parse_date(args.reference_date) if args.reference_date else date.today()
        overrides = {}
        if args.compliance_start:
            overrides["compliance_start_date"] = parse_date(args.compliance_start)
        thresholds = DaysUsedThresholds() if args.scheme == "days_used" else DaysRemainingThresholds()
        config = ComplianceConfig(
            mode=CalculationMode(args.mode),
            reference_date=reference_date,
            thresholds=thresholds,
            **overrides,
        )
        presence = presence_days(trips, config)
        result = compliance_from_presence(presence, config)
        entry = get_safe_entry_info(presence, reference_date, config)
    except (OSError, ValueError, ComplianceError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Loaded %d trip(s) from %s", len(trips), args.csv_path)
    print(f"Reference date: {result.reference_date.isoformat()} ({config.mode.value} mode)")
    print(f"Days used: {result.days_used} / {config.limit}")
    print(f"Days remaining: {result.days_remaining}")
    print(f"Risk level: {result.risk_level.value}")
    print("Compliant:" + (" YES" if result.is_compliant else " NO"))
    print(get_risk_action(result.risk_level, result.days_remaining))
    if not entry.can_enter_today and entry.earliest_safe_date is not None:
        print(
            f"Earliest safe entry: {entry.earliest_safe_date.isoformat()} "
            f"(in {entry.days_until_compliant} days, {entry.days_used_on_entry} used on entry)"
        )
    return 0 if result.is_compliant else 2


if __name__ == "__main__":
    raise SystemExit(main())
