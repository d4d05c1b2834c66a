"""Risk classifier: map window usage to a traffic-light tier.

Two schemes are supported and never mixed:
- days remaining (green/amber/red), thresholds are minimum days left per tier;
- days used (green/amber/red/breach), thresholds are maximum days used per tier.
Breach at 90+ days used is fixed. Tenants can tighten early warnings but not
move the legal line.
"""
from __future__ import annotations

from schengen.errors import InvalidConfigError
from schengen.models.risk import RiskLevel
from schengen.models.schengen_area import SCHENGEN_DAY_LIMIT
from schengen.schemas.thresholds import DaysRemainingThresholds, DaysUsedThresholds, Thresholds


def _remaining_thresholds(thresholds: Thresholds | None) -> DaysRemainingThresholds:
    if thresholds is None:
        thresholds = DaysRemainingThresholds()
    if not isinstance(thresholds, DaysRemainingThresholds):
        raise InvalidConfigError("thresholds", f"expected days_remaining thresholds, got {thresholds.scheme}")
    thresholds.check()
    return thresholds


def _used_thresholds(thresholds: Thresholds | None) -> DaysUsedThresholds:
    if thresholds is None:
        thresholds = DaysUsedThresholds()
    if not isinstance(thresholds, DaysUsedThresholds):
        raise InvalidConfigError("thresholds", f"expected days_used thresholds, got {thresholds.scheme}")
    thresholds.check()
    return thresholds


def _require_breach_limit(limit: int) -> None:
    if limit != SCHENGEN_DAY_LIMIT:
        raise InvalidConfigError(
            "limit", f"The days_used scheme requires the {SCHENGEN_DAY_LIMIT}-day limit, got {limit}"
        )


def get_risk_level(days_remaining: int, thresholds: DaysRemainingThresholds | None = None) -> RiskLevel:
    """green if days_remaining >= green, amber if >= amber, otherwise red (including negative)."""
    t = _remaining_thresholds(thresholds)
    if days_remaining < t.amber:
        return RiskLevel.red
    if days_remaining < t.green:
        return RiskLevel.amber
    return RiskLevel.green


def get_status_from_days_used(days_used: int, thresholds: DaysUsedThresholds | None = None) -> RiskLevel:
    """Dashboard badge. 90+ is breach for every configuration.

    Usage above red_max but below 90 stays red: a tighter red_max cannot turn a
    compliant traveler into a breach.
    """
    t = _used_thresholds(thresholds)
    if days_used >= SCHENGEN_DAY_LIMIT:
        return RiskLevel.breach
    if days_used <= t.green_max:
        return RiskLevel.green
    if days_used <= t.amber_max:
        return RiskLevel.amber
    return RiskLevel.red


def classify(days_used: int, thresholds: Thresholds | None = None, limit: int = SCHENGEN_DAY_LIMIT) -> RiskLevel:
    """Tier for a window result under whichever scheme `thresholds` carries."""
    if isinstance(thresholds, DaysUsedThresholds):
        _require_breach_limit(limit)
        return get_status_from_days_used(days_used, thresholds)
    return get_risk_level(limit - days_used, thresholds)


def get_risk_description(risk_level: RiskLevel) -> str:
    return {
        RiskLevel.green: "Low risk - plenty of days remaining",
        RiskLevel.amber: "Moderate risk - approaching limit",
        RiskLevel.red: "High risk - at or near limit",
        RiskLevel.breach: "Breach - 90-day limit reached or exceeded",
    }[RiskLevel(risk_level)]


def get_risk_action(risk_level: RiskLevel, days_remaining: int) -> str:
    risk_level = RiskLevel(risk_level)
    if risk_level == RiskLevel.green:
        return "Travel planning can proceed normally."
    if risk_level == RiskLevel.amber:
        return "Plan upcoming travel carefully. Consider spreading out Schengen visits."
    if days_remaining < 0:
        over_by = abs(days_remaining)
        return (
            f"Over limit by {over_by} day{'' if over_by == 1 else 's'}. "
            "Traveler must remain outside Schengen until compliant."
        )
    if days_remaining == 0:
        return "Limit reached. No further Schengen days until earlier days expire from the window."
    return "Limit nearly reached. Avoid new Schengen travel unless absolutely necessary."


def get_severity_score(
    days_remaining: int,
    thresholds: Thresholds | None = None,
    limit: int = SCHENGEN_DAY_LIMIT,
) -> int:
    """Sort key for prioritising travelers, higher is more urgent.

    green 0-33, amber 34-66, red 67-99 while compliant; exactly 100 once the
    limit is reached, 100 + days over beyond it.
    The days_used scheme only accepts the 90-day limit, so its breach tier
    and the 100 line always coincide.
    """
    if isinstance(thresholds, DaysUsedThresholds):
        _require_breach_limit(limit)

    if days_remaining <= 0:
        return 100 + abs(days_remaining)

    if isinstance(thresholds, DaysUsedThresholds):
        t = _used_thresholds(thresholds)
        used = limit - days_remaining
        if used <= t.green_max:
            return max(0, round(used / t.green_max * 33))
        if used <= t.amber_max:
            return 34 + round((used - t.green_max) / (t.amber_max - t.green_max) * 32)
        span = (limit - 1) - t.amber_max
        if span <= 0:
            return 99
        return min(99, 67 + round((used - t.amber_max) / span * 32))

    t = _remaining_thresholds(thresholds)
    if days_remaining < t.amber:
        position = t.amber - days_remaining
        return min(99, 67 + round(position / t.amber * 33))
    if days_remaining < t.green:
        position = t.green - days_remaining
        return 34 + round(position / (t.green - t.amber) * 32)

    green_range = limit - t.green
    if green_range <= 0:
        return 0
    position = min(days_remaining, limit) - t.green
    return max(0, 33 - round(position / green_range * 33))
