"""Presence calculator: trips -> set of unique calendar days spent in the Schengen Area.

Entry and exit days both count as full days, so a same-day trip uses one day.
Days are collected in a set, which collapses overlapping trips and multi-country
legs (e.g. FR -> MC -> FR) into a single run of days.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from schengen.errors import InvalidDateRangeError, InvalidTripError
from schengen.models.risk import CalculationMode
from schengen.schemas.compliance import ComplianceConfig
from schengen.schemas.trip import Trip
from schengen.services.countries import is_in_scope
from schengen.services.dates import add_days, iter_days, require_reference_date, to_date

logger = logging.getLogger(__name__)

TripLike = Trip | Mapping[str, Any]


def coerce_trip(trip: TripLike) -> Trip:
    """Accept a Trip or a plain mapping (e.g. a database row). Schema failures become InvalidTripError."""
    if isinstance(trip, Trip):
        return trip
    if isinstance(trip, Mapping):
        try:
            return Trip.model_validate(dict(trip))
        except ValidationError as e:
            err = e.errors()[0]
            field = str(err["loc"][0]) if err.get("loc") else "trip"
            raise InvalidTripError(field, err.get("input"), err.get("msg", "invalid value")) from e
    raise InvalidTripError("trip", trip, f"expected a Trip or mapping, got {type(trip).__name__}")


def validate_trip(trip: Trip) -> Trip:
    """Check one trip's structure and return it with dates reduced to calendar days."""
    entry = trip.entry_date
    if entry is None:
        raise InvalidTripError("entry_date", entry, "Entry date is required")
    if not isinstance(entry, date):
        raise InvalidTripError("entry_date", entry, "Entry date must be a valid date")

    exit_ = trip.exit_date
    if exit_ is not None:
        if not isinstance(exit_, date):
            raise InvalidTripError("exit_date", exit_, "Exit date must be a valid date or None")
        if to_date(exit_) < to_date(entry):
            raise InvalidDateRangeError(to_date(entry), to_date(exit_))

    country = trip.country
    if not isinstance(country, str) or not country.strip():
        raise InvalidTripError("country", country, "Country code is required")

    if isinstance(entry, datetime) or isinstance(exit_, datetime):
        return trip.model_copy(update={
            "entry_date": to_date(entry),
            "exit_date": to_date(exit_) if exit_ is not None else None,
        })
    return trip


def presence_days(trips: Iterable[TripLike], config: ComplianceConfig) -> frozenset[date]:
    """Every distinct day physically spent in scope.

    audit mode counts what has happened up to config.reference_date (inclusive);
    planning mode also counts scheduled future trips. Days before
    config.compliance_start_date are never counted.

    Raises InvalidConfigError, InvalidReferenceDateError, InvalidTripError or
    InvalidDateRangeError; any of them aborts the whole call.
    """
    config.check()
    reference_date = require_reference_date(config.reference_date)
    start_bound = config.compliance_start_date
    audit = config.mode == CalculationMode.audit

    # Validate the whole batch before counting anything
    checked = [validate_trip(coerce_trip(t)) for t in trips]

    days: set[date] = set()
    for trip in checked:
        if not is_in_scope(trip.country):
            logger.debug("Skipping trip %s: %s is not in scope", trip.id, trip.country)
            continue

        end = trip.exit_date if trip.exit_date is not None else reference_date
        if end < start_bound:
            logger.debug("Skipping trip %s: ends %s before compliance start %s", trip.id, end, start_bound)
            continue
        if audit and trip.entry_date > reference_date:
            logger.debug("Skipping trip %s: future trip in audit mode", trip.id)
            continue

        start = max(trip.entry_date, start_bound)
        if audit:
            end = min(end, reference_date)
        days.update(iter_days(start, end))

    logger.debug("Presence: %d day(s) from %d trip(s) (%s mode)", len(days), len(checked), config.mode.value)
    return frozenset(days)


def sorted_days(presence: Iterable[date]) -> list[date]:
    return sorted(presence)


def presence_bounds(presence: Iterable[date]) -> tuple[date, date] | None:
    """(earliest, latest) presence day, or None if there is none."""
    days = sorted_days(presence)
    if not days:
        return None
    return days[0], days[-1]


def presence_spans(presence: Iterable[date]) -> list[tuple[date, date]]:
    """Contiguous runs of presence days as inclusive (start, end) pairs."""
    spans: list[tuple[date, date]] = []
    for day in sorted_days(presence):
        if spans and day == add_days(spans[-1][1], 1):
            spans[-1] = (spans[-1][0], day)
        else:
            spans.append((day, day))
    return spans
