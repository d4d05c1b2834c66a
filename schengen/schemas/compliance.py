"""Compliance configuration and result schemas."""
from datetime import date, datetime
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from schengen.config import get_settings
from schengen.errors import InvalidConfigError
from schengen.models.risk import CalculationMode, RiskLevel
from schengen.models.schengen_area import SCHENGEN_DAY_LIMIT
from schengen.schemas.thresholds import DaysRemainingThresholds, DaysUsedThresholds, Thresholds, config_error
from schengen.services.dates import to_date


def _default_mode() -> CalculationMode:
    mode = get_settings().default_mode
    try:
        return CalculationMode(mode)
    except ValueError:
        raise InvalidConfigError(
            "default_mode", f"{mode!r} is not a calculation mode (expected audit or planning)"
        ) from None


class ComplianceConfig(BaseModel):
    """Inputs shared by every calculation. reference_date is required by the calculators that need it."""
    mode: CalculationMode = Field(default_factory=_default_mode)
    reference_date: date | None = None
    compliance_start_date: date = Field(default_factory=lambda: get_settings().compliance_start_date)
    thresholds: Thresholds = Field(default_factory=DaysRemainingThresholds)
    limit: int = Field(default_factory=lambda: get_settings().day_limit)

    @field_validator("reference_date", "compliance_start_date", mode="before")
    @classmethod
    def datetime_to_day(cls, v):
        if isinstance(v, datetime):
            return to_date(v)
        return v

    @model_validator(mode="wrap")
    @classmethod
    def typed_errors(cls, data, handler):
        """Schema failures (bad or untagged thresholds, unknown mode) become InvalidConfigError."""
        try:
            return handler(data)
        except ValidationError as e:
            raise config_error(e) from e

    class Config:
        frozen = True

    def check(self) -> None:
        """Raise InvalidConfigError for an unusable limit or inconsistent thresholds."""
        if self.limit < 1:
            raise InvalidConfigError("limit", f"Day limit must be at least 1, got {self.limit}")
        if isinstance(self.thresholds, DaysUsedThresholds) and self.limit != SCHENGEN_DAY_LIMIT:
            # Breach tier and compliance must flip on the same day
            raise InvalidConfigError(
                "limit", f"The days_used scheme requires the {SCHENGEN_DAY_LIMIT}-day limit, got {self.limit}"
            )
        self.thresholds.check()


class ComplianceResult(BaseModel):
    reference_date: date
    days_used: int
    days_remaining: int  # negative when over the limit
    risk_level: RiskLevel
    is_compliant: bool

    class Config:
        frozen = True


class DailyCompliance(BaseModel):
    """One calendar cell."""
    date: date
    days_used: int
    days_remaining: int
    risk_level: RiskLevel
    is_compliant: bool

    class Config:
        frozen = True


class SafeEntryResult(BaseModel):
    can_enter_today: bool
    earliest_safe_date: date | None  # None when already eligible
    days_until_compliant: int
    days_used_on_entry: int

    class Config:
        frozen = True


class WindowBounds(BaseModel):
    window_start: date
    window_end: date

    class Config:
        frozen = True


class ExpiryProjection(BaseModel):
    date: date
    expiring_days: int
    days_used: int
    days_remaining: int

    class Config:
        frozen = True
