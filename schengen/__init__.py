"""Schengen 90/180-day compliance engine.

    from datetime import date
    from schengen import ComplianceConfig, Trip, calculate_compliance

    trips = [Trip(entry_date=date(2025, 11, 1), exit_date=date(2025, 11, 10), country="FR")]
    result = calculate_compliance(trips, ComplianceConfig(reference_date=date(2025, 12, 1)))
    result.days_used       # 10
    result.days_remaining  # 80
"""
from schengen.errors import (
    ComplianceError,
    InvalidTripError,
    InvalidDateRangeError,
    InvalidReferenceDateError,
    InvalidConfigError,
)
from schengen.models import CalculationMode, RiskLevel, SCHENGEN_DAY_LIMIT, WINDOW_SIZE_DAYS
from schengen.schemas import (
    Trip,
    DaysRemainingThresholds,
    DaysUsedThresholds,
    ComplianceConfig,
    ComplianceResult,
    DailyCompliance,
    SafeEntryResult,
    WindowBounds,
    ExpiryProjection,
    CountryValidationResult,
)
from schengen.services.countries import (
    is_in_scope,
    validate_country,
    normalize_country_code,
    schengen_country_codes,
    schengen_countries,
)
from schengen.services.presence import presence_days, sorted_days, presence_bounds, presence_spans
from schengen.services.window import (
    is_in_window,
    days_used_in_window,
    calculate_days_remaining,
    is_compliant,
    can_safely_enter,
    get_window_bounds,
)
from schengen.services.risk import (
    get_risk_level,
    get_status_from_days_used,
    classify,
    get_risk_description,
    get_risk_action,
    get_severity_score,
)
from schengen.services.safe_entry import (
    earliest_safe_entry,
    days_until_compliant,
    get_safe_entry_info,
    max_stay_days,
    project_expiring_days,
)
from schengen.services.compliance import calculate_compliance, compliance_from_presence
from schengen.services.vector import compute_compliance_vector, compute_month_compliance, compute_year_compliance
from schengen.services.cached import (
    cached_days_used,
    ComplianceCalculator,
    batch_calculate_compliance,
    compliance_at_dates,
)

__version__ = "0.1.0"
