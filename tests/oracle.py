"""
Reference (oracle) implementation of the 90/180-day rule, for tests only.

Deliberately naive: walks every day one at a time with hardcoded tables.
Never optimise this and never import it from the schengen package. If the
oracle and the engine disagree, investigate both before trusting either.
"""

from datetime import timedelta

LIMIT = 90
WINDOW = 180

SCHENGEN_CODES = [
    "AT", "BE", "BG", "HR", "CZ", "DK", "EE", "FI", "FR", "DE",
    "GR", "HU", "IS", "IT", "LV", "LI", "LT", "LU", "MT", "NL",
    "NO", "PL", "PT", "RO", "SK", "SI", "ES", "SE", "CH",
    # microstates
    "MC", "VA", "SM", "AD",
]
EXCLUDED_CODES = ["IE", "CY", "GB"]


def oracle_is_schengen(country):
    if not country:
        return False
    code = country.strip().upper()
    if code in EXCLUDED_CODES:
        return False
    return code in SCHENGEN_CODES


def oracle_presence_days(trips, mode, reference_date, compliance_start):
    """trips: list of (entry, exit_or_None, country)."""
    days = set()
    for entry, exit_, country in trips:
        if not oracle_is_schengen(country):
            continue
        if exit_ is None:
            exit_ = reference_date
        day = entry
        while day <= exit_:
            counted = day >= compliance_start
            if mode == "audit" and day > reference_date:
                counted = False
            if counted:
                days.add(day)
            day = day + timedelta(days=1)
    return days


def oracle_days_used(presence, reference_date, compliance_start):
    count = 0
    for back in range(WINDOW):
        day = reference_date - timedelta(days=back)
        if day >= compliance_start and day in presence:
            count += 1
    return count


def oracle_risk_level(days_remaining):
    if days_remaining >= 16:
        return "green"
    if days_remaining >= 1:
        return "amber"
    return "red"


def oracle_earliest_safe_entry(presence, today, compliance_start):
    if oracle_days_used(presence, today, compliance_start) <= LIMIT - 1:
        return None
    for ahead in range(1, WINDOW + 1):
        day = today + timedelta(days=ahead)
        if oracle_days_used(presence, day, compliance_start) <= LIMIT - 1:
            return day
    return None


def oracle_calculate(trips, mode, reference_date, compliance_start):
    presence = oracle_presence_days(trips, mode, reference_date, compliance_start)
    used = oracle_days_used(presence, reference_date, compliance_start)
    return {
        "days_used": used,
        "days_remaining": LIMIT - used,
        "is_compliant": used < LIMIT,
        "risk_level": oracle_risk_level(LIMIT - used),
    }
