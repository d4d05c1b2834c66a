"""Per-day compliance for calendar views.

Calling days_used_in_window once per cell costs O(days x window). Here the
window slides one day at a time instead: the new reference date enters, the
day 179 days before the old one leaves.
"""
from __future__ import annotations

import calendar
from collections.abc import Iterable
from datetime import date

from schengen.errors import InvalidReferenceDateError
from schengen.models.schengen_area import WINDOW_SIZE_DAYS
from schengen.schemas.compliance import ComplianceConfig, DailyCompliance
from schengen.services.dates import add_days, require_reference_date
from schengen.services.presence import TripLike, presence_days
from schengen.services.risk import classify


def compute_compliance_vector(
    trips: Iterable[TripLike],
    start_date: date,
    end_date: date,
    config: ComplianceConfig,
) -> list[DailyCompliance]:
    """One DailyCompliance per day from start_date to end_date inclusive.

    Presence is built once with `config` (so audit mode only counts trips up
    to config.reference_date).
    """
    start = require_reference_date(start_date, "Start date")
    end = require_reference_date(end_date, "End date")
    if start > end:
        raise InvalidReferenceDateError(start_date, "Start date must be on or before end date")

    config.check()
    presence = presence_days(trips, config)
    compliance_start = config.compliance_start_date
    limit = config.limit

    window_start = max(add_days(start, -(WINDOW_SIZE_DAYS - 1)), compliance_start)
    count = sum(1 for day in presence if window_start <= day <= start)

    cells: list[DailyCompliance] = []
    current = start
    while True:
        cells.append(DailyCompliance(
            date=current,
            days_used=count,
            days_remaining=limit - count,
            risk_level=classify(count, config.thresholds, limit),
            is_compliant=count < limit,
        ))
        if current >= end:
            break

        leaving = add_days(current, -(WINDOW_SIZE_DAYS - 1))
        if leaving >= compliance_start and leaving in presence:
            count -= 1
        current = add_days(current, 1)
        if current >= compliance_start and current in presence:
            count += 1

    return cells


def compute_month_compliance(trips: Iterable[TripLike], year: int, month: int, config: ComplianceConfig) -> list[DailyCompliance]:
    """month is 1-12."""
    last_day = calendar.monthrange(year, month)[1]
    return compute_compliance_vector(trips, date(year, month, 1), date(year, month, last_day), config)


def compute_year_compliance(trips: Iterable[TripLike], year: int, config: ComplianceConfig) -> list[DailyCompliance]:
    return compute_compliance_vector(trips, date(year, 1, 1), date(year, 12, 31), config)
