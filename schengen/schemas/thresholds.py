"""Risk threshold schemes.

The two schemes are separate models tagged by ``scheme`` so a days-remaining
configuration can never be fed to a days-used classification (or vice versa).
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from schengen.config import get_settings
from schengen.errors import InvalidConfigError
from schengen.models.schengen_area import SCHENGEN_DAY_LIMIT


def config_error(e: ValidationError, prefix: str = "") -> InvalidConfigError:
    """First schema failure as InvalidConfigError, keyed by its dotted field path."""
    err = e.errors()[0]
    key = ".".join(str(part) for part in (prefix, *err.get("loc", ())) if part != "")
    return InvalidConfigError(key or "config", err.get("msg", "invalid value"))


class DaysRemainingThresholds(BaseModel):
    """Minimum days remaining for each tier: green >= green, amber >= amber, else red."""
    scheme: Literal["days_remaining"] = "days_remaining"
    green: int = Field(default_factory=lambda: get_settings().risk_green_days)
    amber: int = Field(default_factory=lambda: get_settings().risk_amber_days)

    @model_validator(mode="wrap")
    @classmethod
    def typed_errors(cls, data, handler):
        try:
            return handler(data)
        except ValidationError as e:
            raise config_error(e, "thresholds") from e

    class Config:
        frozen = True

    def check(self) -> None:
        if self.green < 0:
            raise InvalidConfigError("thresholds.green", "Green threshold cannot be negative")
        if self.amber < 0:
            raise InvalidConfigError("thresholds.amber", "Amber threshold cannot be negative")
        if self.amber >= self.green:
            raise InvalidConfigError(
                "thresholds.amber",
                f"Amber threshold ({self.amber}) must be less than green threshold ({self.green})",
            )


class DaysUsedThresholds(BaseModel):
    """Maximum days used for each tier. 90+ is always breach and cannot be configured."""
    scheme: Literal["days_used"] = "days_used"
    green_max: int = Field(default_factory=lambda: get_settings().status_green_max)
    amber_max: int = Field(default_factory=lambda: get_settings().status_amber_max)
    red_max: int = Field(default_factory=lambda: get_settings().status_red_max)

    @model_validator(mode="wrap")
    @classmethod
    def typed_errors(cls, data, handler):
        try:
            return handler(data)
        except ValidationError as e:
            raise config_error(e, "thresholds") from e

    class Config:
        frozen = True

    def check(self) -> None:
        if self.green_max <= 0:
            raise InvalidConfigError("thresholds.green_max", "Green maximum must be greater than 0")
        if self.amber_max <= self.green_max:
            raise InvalidConfigError(
                "thresholds.amber_max",
                f"Amber maximum ({self.amber_max}) must be greater than green maximum ({self.green_max})",
            )
        if self.red_max <= self.amber_max:
            raise InvalidConfigError(
                "thresholds.red_max",
                f"Red maximum ({self.red_max}) must be greater than amber maximum ({self.amber_max})",
            )
        if self.red_max >= SCHENGEN_DAY_LIMIT:
            raise InvalidConfigError(
                "thresholds.red_max",
                f"Red maximum ({self.red_max}) must be below the {SCHENGEN_DAY_LIMIT}-day breach line",
            )


Thresholds = Annotated[Union[DaysRemainingThresholds, DaysUsedThresholds], Field(discriminator="scheme")]
