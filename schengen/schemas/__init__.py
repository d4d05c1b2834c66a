from schengen.schemas.trip import Trip
from schengen.schemas.thresholds import DaysRemainingThresholds, DaysUsedThresholds, Thresholds
from schengen.schemas.compliance import (
    ComplianceConfig,
    ComplianceResult,
    DailyCompliance,
    SafeEntryResult,
    WindowBounds,
    ExpiryProjection,
)
from schengen.schemas.country import CountryValidationResult
