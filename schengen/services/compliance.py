"""One-shot compliance status for a traveler."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Set
from datetime import date

from schengen.schemas.compliance import ComplianceConfig, ComplianceResult
from schengen.services.dates import require_reference_date
from schengen.services.presence import TripLike, presence_days
from schengen.services.risk import classify
from schengen.services.window import days_used_in_window

logger = logging.getLogger(__name__)


def compliance_from_presence(
    presence: Set[date],
    config: ComplianceConfig,
    reference_date: date | None = None,
) -> ComplianceResult:
    """Window and tier for an already built presence set.

    reference_date defaults to config.reference_date. config is assumed checked.
    """
    reference_date = require_reference_date(reference_date if reference_date is not None else config.reference_date)
    days_used = days_used_in_window(presence, reference_date, config)
    return ComplianceResult(
        reference_date=reference_date,
        days_used=days_used,
        days_remaining=config.limit - days_used,
        risk_level=classify(days_used, config.thresholds, config.limit),
        is_compliant=days_used < config.limit,
    )


def calculate_compliance(trips: Iterable[TripLike], config: ComplianceConfig) -> ComplianceResult:
    """Presence -> window -> tier for config.reference_date.

    Configuration is validated before any trip is looked at.
    """
    config.check()
    presence = presence_days(trips, config)
    result = compliance_from_presence(presence, config)
    logger.debug(
        "Compliance on %s: %d used, %d remaining, %s",
        result.reference_date, result.days_used, result.days_remaining, result.risk_level.value,
    )
    return result
