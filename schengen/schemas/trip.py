"""Trip schema: one continuous stay in a single country, both ends inclusive."""
from datetime import date, datetime
from pydantic import BaseModel, field_validator
from schengen.services.dates import to_date


class Trip(BaseModel):
    # Optional here so that missing values reach the engine and fail with InvalidTripError
    entry_date: date | None = None
    exit_date: date | None = None  # None = ongoing, counted through the reference date
    country: str | None = None  # ISO 3166-1 alpha-2, already normalized upstream
    id: str | int | None = None

    @field_validator("entry_date", "exit_date", mode="before")
    @classmethod
    def datetime_to_day(cls, v):
        if isinstance(v, datetime):
            return to_date(v)
        return v

    @property
    def is_active(self) -> bool:
        return self.exit_date is None

    class Config:
        frozen = True
