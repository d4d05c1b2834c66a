"""Country classification detail."""
from pydantic import BaseModel


class CountryValidationResult(BaseModel):
    is_schengen: bool
    country_code: str | None = None
    country_name: str | None = None
    exclusion_reason: str | None = None
    is_microstate: bool = False

    class Config:
        frozen = True
