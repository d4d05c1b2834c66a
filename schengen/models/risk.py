"""Risk tiers and calculation modes."""
import enum


class RiskLevel(str, enum.Enum):
    green = "green"
    amber = "amber"
    red = "red"
    breach = "breach"  # 90+ days used; days-used scheme only


class CalculationMode(str, enum.Enum):
    audit = "audit"  # past and present only (dashboard status)
    planning = "planning"  # includes scheduled future trips (forecast)
