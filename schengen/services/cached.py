"""Opt-in memoization for callers that hit the same presence set many times (calendar cells, dashboards).

Purely a speed-up: every function here returns exactly what the uncached
calculators return.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from datetime import date
from functools import lru_cache

from schengen.models.risk import CalculationMode
from schengen.schemas.compliance import ComplianceConfig, ComplianceResult
from schengen.services.compliance import calculate_compliance, compliance_from_presence
from schengen.services.dates import require_reference_date
from schengen.services.presence import TripLike, coerce_trip, presence_days
from schengen.services.window import days_used_in_window


@lru_cache(maxsize=4096)
def cached_days_used(presence: frozenset[date], ref_date: date, config: ComplianceConfig | None = None) -> int:
    """days_used_in_window keyed on (presence, ref_date, config). presence must be a frozenset."""
    return days_used_in_window(presence, ref_date, config)


class ComplianceCalculator:
    """Memoizes calculate_compliance per instance.

    Keyed on the set of trips and the (frozen) config, so the same trips in a
    different order hit the same entry. Holds at most maxsize results; the
    oldest entry is evicted first.
    """

    def __init__(self, maxsize: int = 1024) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._cache: dict[tuple[frozenset, ComplianceConfig], ComplianceResult] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, trips: Iterable[TripLike], config: ComplianceConfig) -> ComplianceResult:
        checked = tuple(coerce_trip(t) for t in trips)
        key = (frozenset(checked), config)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        result = calculate_compliance(checked, config)
        if len(self._cache) >= self.maxsize:
            self._cache.pop(next(iter(self._cache)))
        self._cache[key] = result
        return result

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        self._cache.clear()
        self.hits = 0
        self.misses = 0


def batch_calculate_compliance(
    employees: Mapping[Hashable, Iterable[TripLike]],
    reference_date: date,
    config: ComplianceConfig | None = None,
) -> dict[Hashable, ComplianceResult]:
    """Status for many travelers on one reference date: {employee_id: result}."""
    reference_date = require_reference_date(reference_date)
    base = (config or ComplianceConfig()).model_copy(update={"reference_date": reference_date})
    base.check()
    return {employee_id: calculate_compliance(trips, base) for employee_id, trips in employees.items()}


def compliance_at_dates(
    trips: Iterable[TripLike],
    dates: Iterable[date],
    config: ComplianceConfig | None = None,
) -> dict[date, ComplianceResult]:
    """Audit-mode status at each requested date; presence is computed once up to the latest date."""
    days = [require_reference_date(d) for d in dates]
    if not days:
        return {}

    base = config or ComplianceConfig()
    base.check()
    presence_config = base.model_copy(update={"mode": CalculationMode.audit, "reference_date": max(days)})
    presence = presence_days(trips, presence_config)

    return {day: compliance_from_presence(presence, base, day) for day in days}
