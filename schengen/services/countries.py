"""Country classifier: is a country code inside the Schengen short-stay area."""
from __future__ import annotations

from typing import Any

from schengen.models.schengen_area import EXCLUDED, EXCLUDED_CODES, IN_SCOPE_CODES, MEMBERS, MICROSTATES
from schengen.schemas.country import CountryValidationResult


def _normalize(code: Any) -> str | None:
    if not isinstance(code, str):
        return None
    normalized = code.strip().upper()
    return normalized or None


def is_in_scope(code: Any) -> bool:
    """True for members and open-border microstates. Unknown and excluded codes are simply out of scope."""
    normalized = _normalize(code)
    if normalized is None or normalized in EXCLUDED_CODES:
        return False
    return normalized in IN_SCOPE_CODES


def validate_country(code: Any) -> CountryValidationResult:
    normalized = _normalize(code)
    if normalized is None:
        return CountryValidationResult(is_schengen=False)

    if normalized in EXCLUDED:
        excluded = EXCLUDED[normalized]
        return CountryValidationResult(
            is_schengen=False,
            country_code=normalized,
            country_name=excluded.name,
            exclusion_reason=excluded.reason,
        )
    if normalized in MEMBERS:
        return CountryValidationResult(
            is_schengen=True,
            country_code=normalized,
            country_name=MEMBERS[normalized].name,
        )
    if normalized in MICROSTATES:
        return CountryValidationResult(
            is_schengen=True,
            country_code=normalized,
            country_name=MICROSTATES[normalized].name,
            is_microstate=True,
        )
    return CountryValidationResult(is_schengen=False)


def normalize_country_code(code: Any) -> str | None:
    """Upper-cased code when in scope, else None."""
    result = validate_country(code)
    return result.country_code if result.is_schengen else None


def schengen_country_codes() -> list[str]:
    return sorted(IN_SCOPE_CODES)


def schengen_countries() -> list[dict]:
    """[{code, name, is_microstate}] sorted by name, for pickers."""
    countries = [
        {"code": code, "name": m.name, "is_microstate": False}
        for code, m in MEMBERS.items()
        if code in IN_SCOPE_CODES
    ]
    countries += [
        {"code": code, "name": m.name, "is_microstate": True}
        for code, m in MICROSTATES.items()
        if code in IN_SCOPE_CODES
    ]
    return sorted(countries, key=lambda c: c["name"])
