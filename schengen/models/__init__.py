"""Static reference data and enumerations. Nothing here is mutable."""
from schengen.models.risk import RiskLevel, CalculationMode
from schengen.models.schengen_area import (
    MEMBERS,
    MICROSTATES,
    EXCLUDED,
    IN_SCOPE_CODES,
    EXCLUDED_CODES,
    SCHENGEN_DAY_LIMIT,
    WINDOW_SIZE_DAYS,
)

__all__ = [
    "RiskLevel",
    "CalculationMode",
    "MEMBERS",
    "MICROSTATES",
    "EXCLUDED",
    "IN_SCOPE_CODES",
    "EXCLUDED_CODES",
    "SCHENGEN_DAY_LIMIT",
    "WINDOW_SIZE_DAYS",
]
