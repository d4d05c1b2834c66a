"""Rolling 180-day window.

For a reference date R the window is [R - 179, R], both ends inclusive: the
reference date belongs to its own lookback period. The window start is raised
to the compliance start date when it would fall before it.
"""
from __future__ import annotations

from collections.abc import Set
from datetime import date

from schengen.config import get_settings
from schengen.models.schengen_area import WINDOW_SIZE_DAYS
from schengen.schemas.compliance import ComplianceConfig, WindowBounds
from schengen.services.dates import add_days, days_between, iter_days, require_reference_date


def start_and_limit(config: ComplianceConfig | None) -> tuple[date, int]:
    if config is None:
        settings = get_settings()
        return settings.compliance_start_date, settings.day_limit
    return config.compliance_start_date, config.limit


def is_in_window(day: date, ref_date: date) -> bool:
    """Unclamped membership test: ref_date - 179 <= day <= ref_date."""
    ref = require_reference_date(ref_date)
    return add_days(ref, -(WINDOW_SIZE_DAYS - 1)) <= day <= ref


def get_window_bounds(ref_date: date, config: ComplianceConfig | None = None) -> WindowBounds:
    ref = require_reference_date(ref_date)
    compliance_start, _ = start_and_limit(config)
    window_start = max(add_days(ref, -(WINDOW_SIZE_DAYS - 1)), compliance_start)
    return WindowBounds(window_start=window_start, window_end=ref)


def days_used_in_window(presence: Set[date], ref_date: date, config: ComplianceConfig | None = None) -> int:
    """Presence days inside the (possibly clamped) window ending on ref_date."""
    bounds = get_window_bounds(ref_date, config)
    if bounds.window_end < bounds.window_start:
        # Whole window precedes compliance tracking
        return 0
    span = days_between(bounds.window_end, bounds.window_start) + 1
    if len(presence) < span:
        return sum(1 for day in presence if bounds.window_start <= day <= bounds.window_end)
    return sum(1 for day in iter_days(bounds.window_start, bounds.window_end) if day in presence)


def calculate_days_remaining(presence: Set[date], ref_date: date, config: ComplianceConfig | None = None) -> int:
    """limit - days used. Negative values show how far over the limit the traveler is."""
    _, limit = start_and_limit(config)
    return limit - days_used_in_window(presence, ref_date, config)


def is_compliant(presence: Set[date], ref_date: date, config: ComplianceConfig | None = None) -> bool:
    """Exactly `limit` days is already a violation; the most a compliant traveler can have is limit - 1."""
    _, limit = start_and_limit(config)
    return days_used_in_window(presence, ref_date, config) < limit


def can_safely_enter(presence: Set[date], ref_date: date, config: ComplianceConfig | None = None) -> bool:
    """Room for at least the entry day itself."""
    _, limit = start_and_limit(config)
    return days_used_in_window(presence, ref_date, config) <= limit - 1
