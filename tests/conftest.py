"""
Pytest configuration and shared fixtures.

Tests pin compliance_start_date and thresholds explicitly so results never
depend on SCHENGEN_* environment variables.
"""

import os
import sys
from datetime import date, timedelta

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from schengen.models.risk import CalculationMode
from schengen.schemas.compliance import ComplianceConfig
from schengen.schemas.thresholds import DaysRemainingThresholds
from schengen.schemas.trip import Trip

FAR_PAST = date(2000, 1, 1)


@pytest.fixture
def make_trip():
    """Trip factory: make_trip("2025-11-01", "2025-11-10", "FR")."""
    def _make(entry, exit=None, country="FR", id=None):
        entry_date = date.fromisoformat(entry) if isinstance(entry, str) else entry
        exit_date = date.fromisoformat(exit) if isinstance(exit, str) else exit
        return Trip(entry_date=entry_date, exit_date=exit_date, country=country, id=id)
    return _make


@pytest.fixture
def make_config():
    """Config factory with a far-past compliance start and the stock days-remaining thresholds."""
    def _make(reference_date, mode=CalculationMode.audit, compliance_start_date=FAR_PAST, thresholds=None, limit=90):
        if isinstance(reference_date, str):
            reference_date = date.fromisoformat(reference_date)
        return ComplianceConfig(
            mode=mode,
            reference_date=reference_date,
            compliance_start_date=compliance_start_date,
            thresholds=thresholds or DaysRemainingThresholds(green=16, amber=1),
            limit=limit,
        )
    return _make


@pytest.fixture
def days_span():
    """Presence set for `count` consecutive days ending on `last`."""
    def _make(last, count):
        return frozenset(last - timedelta(days=i) for i in range(count))
    return _make
