"""Schengen Area membership table (point-in-time snapshot) and rule constants.

Verify membership against the EU source before each release. Accession dates
are kept for reference only; classification does not depend on trip dates.
"""
from types import MappingProxyType
from typing import NamedTuple

MEMBERSHIP_VERSION = "2025-01-07"
MEMBERSHIP_SOURCE_URL = "https://home-affairs.ec.europa.eu/policies/schengen-borders-and-visa/schengen-area_en"

# Regulation (EU) 610/2013: 90 days in any 180-day period
SCHENGEN_DAY_LIMIT = 90
WINDOW_SIZE_DAYS = 180


class Member(NamedTuple):
    name: str
    since: str


class Microstate(NamedTuple):
    name: str
    rationale: str


class ExcludedCountry(NamedTuple):
    name: str
    reason: str


MEMBERS = MappingProxyType({
    "AT": Member("Austria", "1997-12-01"),
    "BE": Member("Belgium", "1995-03-26"),
    "BG": Member("Bulgaria", "2025-01-01"),  # land borders removed Jan 2025
    "HR": Member("Croatia", "2023-01-01"),
    "CZ": Member("Czech Republic", "2007-12-21"),
    "DK": Member("Denmark", "2001-03-25"),
    "EE": Member("Estonia", "2007-12-21"),
    "FI": Member("Finland", "2001-03-25"),
    "FR": Member("France", "1995-03-26"),
    "DE": Member("Germany", "1995-03-26"),
    "GR": Member("Greece", "2000-01-01"),
    "HU": Member("Hungary", "2007-12-21"),
    "IS": Member("Iceland", "2001-03-25"),
    "IT": Member("Italy", "1997-10-26"),
    "LV": Member("Latvia", "2007-12-21"),
    "LI": Member("Liechtenstein", "2011-12-19"),
    "LT": Member("Lithuania", "2007-12-21"),
    "LU": Member("Luxembourg", "1995-03-26"),
    "MT": Member("Malta", "2007-12-21"),
    "NL": Member("Netherlands", "1995-03-26"),
    "NO": Member("Norway", "2001-03-25"),
    "PL": Member("Poland", "2007-12-21"),
    "PT": Member("Portugal", "1995-03-26"),
    "RO": Member("Romania", "2025-01-01"),  # land borders removed Jan 2025
    "SK": Member("Slovakia", "2007-12-21"),
    "SI": Member("Slovenia", "2007-12-21"),
    "ES": Member("Spain", "1995-03-26"),
    "SE": Member("Sweden", "2001-03-25"),
    "CH": Member("Switzerland", "2008-12-12"),
})

# No border controls with their neighbours: border agents count these days as Schengen presence
MICROSTATES = MappingProxyType({
    "MC": Microstate("Monaco", "Open border with France, no passport control"),
    "VA": Microstate("Vatican City", "Open border with Italy, no passport control"),
    "SM": Microstate("San Marino", "Open border with Italy, no passport control"),
    "AD": Microstate("Andorra", "Open borders with France/Spain, no passport control"),
})

# Commonly mistaken for Schengen
EXCLUDED = MappingProxyType({
    "IE": ExcludedCountry("Ireland", "EU member, opted out of Schengen"),
    "CY": ExcludedCountry("Cyprus", "EU member, not yet implemented Schengen"),
    "GB": ExcludedCountry("United Kingdom", "Not EU, not Schengen"),
})

EXCLUDED_CODES = frozenset(EXCLUDED)
IN_SCOPE_CODES = frozenset(set(MEMBERS) | set(MICROSTATES)) - EXCLUDED_CODES
