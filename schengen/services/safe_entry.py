"""Safe-entry solver: when can a traveler over (or at) the limit enter again.

Days are never released on demand. They expire passively as the lookback
window slides forward, so the solver walks forward one day at a time and
re-counts the window. After one full window length every currently counted
day has expired, which bounds the search.
"""
from __future__ import annotations

import logging
from collections.abc import Set
from datetime import date

from schengen.models.schengen_area import WINDOW_SIZE_DAYS
from schengen.schemas.compliance import ComplianceConfig, ExpiryProjection, SafeEntryResult
from schengen.services.dates import add_days, days_between, require_reference_date
from schengen.services.window import start_and_limit, can_safely_enter, days_used_in_window

logger = logging.getLogger(__name__)


def earliest_safe_entry(presence: Set[date], today: date, config: ComplianceConfig | None = None) -> date | None:
    """First date after today with at most limit - 1 days used, or None if entry is already safe today."""
    today = require_reference_date(today, "Today")
    _, limit = start_and_limit(config)

    if can_safely_enter(presence, today, config):
        return None

    for days_ahead in range(1, WINDOW_SIZE_DAYS + 1):
        candidate = add_days(today, days_ahead)
        if days_used_in_window(presence, candidate, config) <= limit - 1:
            logger.debug("Safe entry from %s: %d day(s) after %s", candidate, days_ahead, today)
            return candidate

    # Only reachable with future presence (planning mode) filling the next window too
    logger.debug("No safe entry within %d days of %s", WINDOW_SIZE_DAYS, today)
    return None


def days_until_compliant(presence: Set[date], today: date, config: ComplianceConfig | None = None) -> int:
    """0 when entry is already safe."""
    today = require_reference_date(today, "Today")
    safe_date = earliest_safe_entry(presence, today, config)
    if safe_date is None:
        return 0
    return days_between(safe_date, today)


def get_safe_entry_info(presence: Set[date], today: date, config: ComplianceConfig | None = None) -> SafeEntryResult:
    today = require_reference_date(today, "Today")
    _, limit = start_and_limit(config)

    current = days_used_in_window(presence, today, config)
    if current <= limit - 1:
        return SafeEntryResult(
            can_enter_today=True,
            earliest_safe_date=None,
            days_until_compliant=0,
            days_used_on_entry=current,
        )

    safe_date = earliest_safe_entry(presence, today, config)
    return SafeEntryResult(
        can_enter_today=False,
        earliest_safe_date=safe_date,
        days_until_compliant=days_between(safe_date, today) if safe_date else 0,
        days_used_on_entry=days_used_in_window(presence, safe_date, config) if safe_date else current,
    )


def max_stay_days(presence: Set[date], entry_date: date, config: ComplianceConfig | None = None) -> int:
    """Consecutive days stayable from entry_date before reaching the limit again; 0 if entry is unsafe.

    Counted against the window at entry. Days that expire during the stay are
    not credited back.
    """
    entry_date = require_reference_date(entry_date, "Entry date")
    _, limit = start_and_limit(config)
    used = days_used_in_window(presence, entry_date, config)
    if used > limit - 1:
        return 0
    return limit - used


def project_expiring_days(
    presence: Set[date],
    from_date: date,
    days: int,
    config: ComplianceConfig | None = None,
) -> list[ExpiryProjection]:
    """Day-by-day forecast of usage from from_date through from_date + days (display only)."""
    from_date = require_reference_date(from_date, "Start date")
    _, limit = start_and_limit(config)

    projection: list[ExpiryProjection] = []
    previous = days_used_in_window(presence, from_date, config)
    for offset in range(days + 1):
        day = add_days(from_date, offset)
        used = days_used_in_window(presence, day, config)
        projection.append(ExpiryProjection(
            date=day,
            expiring_days=0 if offset == 0 else max(0, previous - used),
            days_used=used,
            days_remaining=limit - used,
        ))
        previous = used
    return projection
