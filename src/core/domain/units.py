"""Measurement units for user-facing output.

This module centralizes the unit systems supported across the
application. Keeping it in the domain layer allows both CLI and
adapters to share a single source of truth without creating circular
imports.
"""

from __future__ import annotations

from enum import Enum


class Units(str, Enum):
    """Supported unit systems for weather output."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    def temperature_symbol(self) -> str:
        return "°F" if self is Units.IMPERIAL else "°C"

    def speed_symbol(self) -> str:
        return "mph" if self is Units.IMPERIAL else "km/h"


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32.0) * 5.0 / 9.0


KPH_PER_MPH = 1.609344


def mph_to_kph(value: float) -> float:
    return value * KPH_PER_MPH


def kph_to_mph(value: float) -> float:
    return value / KPH_PER_MPH
