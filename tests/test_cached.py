"""Memoized helpers must return exactly what the plain calculators return."""

from datetime import date, timedelta

import pytest

from schengen.errors import InvalidReferenceDateError
from schengen.services.cached import (
    ComplianceCalculator,
    batch_calculate_compliance,
    cached_days_used,
    compliance_at_dates,
)
from schengen.services.compliance import calculate_compliance
from schengen.services.presence import presence_days
from schengen.services.window import days_used_in_window


@pytest.fixture
def trips(make_trip):
    return [
        make_trip("2025-11-01", "2025-11-10", "FR", id=1),
        make_trip("2025-11-05", "2025-11-15", "DE", id=2),
        make_trip("2026-01-02", "2026-02-20", "AT", id=3),
    ]


class TestCachedDaysUsed:

    def test_same_as_uncached(self, trips, make_config):
        config = make_config("2026-03-01")
        presence = presence_days(trips, config)
        for offset in range(0, 200, 7):
            day = date(2025, 11, 1) + timedelta(days=offset)
            assert cached_days_used(presence, day, config) == days_used_in_window(presence, day, config)

    def test_cache_hit(self, days_span, make_config):
        cached_days_used.cache_clear()
        presence = days_span(date(2026, 3, 1), 40)
        config = make_config("2026-03-01")
        cached_days_used(presence, date(2026, 3, 1), config)
        cached_days_used(presence, date(2026, 3, 1), config)
        assert cached_days_used.cache_info().hits == 1


class TestComplianceCalculator:

    def test_same_as_uncached(self, trips, make_config):
        calc = ComplianceCalculator()
        config = make_config("2026-03-01")
        assert calc(trips, config) == calculate_compliance(trips, config)

    def test_reordered_trips_hit(self, trips, make_config):
        calc = ComplianceCalculator()
        config = make_config("2026-03-01")
        first = calc(trips, config)
        second = calc(list(reversed(trips)), config)
        assert first == second
        assert calc.hits == 1
        assert calc.misses == 1
        assert len(calc) == 1

    def test_different_config_misses(self, trips, make_config):
        calc = ComplianceCalculator()
        calc(trips, make_config("2026-03-01"))
        calc(trips, make_config("2026-03-02"))
        assert calc.misses == 2
        assert len(calc) == 2

    def test_mapping_trips(self, make_config):
        calc = ComplianceCalculator()
        config = make_config("2025-12-01")
        trips = [{"entry_date": date(2025, 11, 1), "exit_date": date(2025, 11, 10), "country": "FR"}]
        assert calc(trips, config).days_used == 10
        assert calc(trips, config).days_used == 10
        assert calc.hits == 1

    def test_clear(self, trips, make_config):
        calc = ComplianceCalculator()
        calc(trips, make_config("2026-03-01"))
        calc.clear()
        assert len(calc) == 0
        assert calc.hits == 0
        assert calc.misses == 0


class TestBatch:

    def test_per_employee(self, trips, make_trip, make_config):
        base = make_config("2025-01-01")
        employees = {
            "alice": trips,
            "bob": [make_trip("2025-11-20", "2025-11-29", "IT")],
            "carol": [],
        }
        results = batch_calculate_compliance(employees, date(2025, 12, 1), base)
        assert set(results) == {"alice", "bob", "carol"}
        assert results["alice"].days_used == 15
        assert results["bob"].days_used == 10
        assert results["carol"].days_used == 0
        assert all(r.reference_date == date(2025, 12, 1) for r in results.values())

    def test_requires_reference_date(self, trips, make_config):
        with pytest.raises(InvalidReferenceDateError):
            batch_calculate_compliance({"alice": trips}, None, make_config("2025-12-01"))


class TestComplianceAtDates:

    def test_matches_calculate_compliance(self, trips, make_config):
        dates = [date(2025, 11, 3), date(2025, 12, 1), date(2026, 1, 15), date(2026, 3, 1), date(2026, 8, 1)]
        base = make_config("2025-01-01")
        results = compliance_at_dates(trips, dates, base)
        assert list(results) == dates
        for day in dates:
            assert results[day] == calculate_compliance(trips, base.model_copy(update={"reference_date": day}))

    def test_empty(self, trips, make_config):
        assert compliance_at_dates(trips, [], make_config("2025-12-01")) == {}


class TestCalculatorBound:

    def test_oldest_entry_evicted(self, trips, make_config):
        calc = ComplianceCalculator(maxsize=2)
        first = make_config("2026-03-01")
        calc(trips, first)
        calc(trips, make_config("2026-03-02"))
        calc(trips, make_config("2026-03-03"))
        assert len(calc) == 2
        calc(trips, first)
        assert calc.misses == 4
        assert calc.hits == 0

    def test_maxsize_must_be_positive(self):
        with pytest.raises(ValueError):
            ComplianceCalculator(maxsize=0)
