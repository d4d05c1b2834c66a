"""Typed errors raised by the compliance engine. Each one aborts the whole call."""
from __future__ import annotations

from datetime import date
from typing import Any


class ComplianceError(Exception):
    """Base class for every compliance calculation failure."""


class InvalidTripError(ComplianceError):
    """A trip is structurally broken (missing/invalid date or country)."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid trip {field}: {reason}")


class InvalidDateRangeError(ComplianceError):
    """Exit date before entry date."""

    def __init__(self, entry_date: date, exit_date: date):
        self.entry_date = entry_date
        self.exit_date = exit_date
        super().__init__(
            f"Invalid date range: exit ({exit_date.isoformat()}) is before entry ({entry_date.isoformat()})"
        )


class InvalidReferenceDateError(ComplianceError):
    """Reference date ("today") missing or not a date."""

    def __init__(self, reference_date: Any, reason: str):
        self.reference_date = reference_date
        self.reason = reason
        super().__init__(f"Invalid reference date: {reason}")


class InvalidConfigError(ComplianceError):
    """Thresholds or limit are inconsistent or out of range."""

    def __init__(self, config_key: str, reason: str):
        self.config_key = config_key
        self.reason = reason
        super().__init__(f'Invalid configuration "{config_key}": {reason}')
