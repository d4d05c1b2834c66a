"""Compliance calculators. Every function here is pure and keeps no state between calls."""
