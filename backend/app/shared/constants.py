"""
Unified constants for race tiers, unit systems and normalization.

This module provides a single source of truth for tier and unit naming
across the entire application.
"""

from enum import Enum


class Tier(str, Enum):
    """
    Standard triathlon race distance tiers.

    Used in:
    - Standards lookup
    - Normalization requests
    - Form state (target distance)
    """
    OLYMPIC = "olympic"
    HALF = "70.3"
    FULL = "full"


class UnitSystem(str, Enum):
    """
    Unit system for distances.

    Selects both the standards table and the swim pace convention.
    """
    METRIC = "metric"
    IMPERIAL = "imperial"


class Discipline(str, Enum):
    """Race disciplines with a distance."""
    SWIM = "swim"
    BIKE = "bike"
    RUN = "run"


# Display order of tiers (shortest first)
TIER_ORDER: list[Tier] = [Tier.OLYMPIC, Tier.HALF, Tier.FULL]

# Transitions are fixed at this duration in the normalized total,
# and used as the default when a transition time is left blank.
STANDARD_TRANSITION_MINUTES = 2.0

# Swim pace divisor: standard swim distance units -> pace units.
# Imperial divides miles by 16.0934 (hundreds of meters per mile) while
# SWIM_PACE_UNITS labels the result "/100yd"; the label is kept as displayed.
SWIM_PACE_DIVISOR: dict[UnitSystem, float] = {
    UnitSystem.METRIC: 10.0,
    UnitSystem.IMPERIAL: 16.0934,
}

# Labels for the outer surfaces (API, CLI). The engine never appends them.
DISTANCE_UNITS: dict[UnitSystem, str] = {
    UnitSystem.METRIC: "km",
    UnitSystem.IMPERIAL: "mi",
}

SPEED_UNITS: dict[UnitSystem, str] = {
    UnitSystem.METRIC: "km/h",
    UnitSystem.IMPERIAL: "mph",
}

SWIM_PACE_UNITS: dict[UnitSystem, str] = {
    UnitSystem.METRIC: "/100m",
    UnitSystem.IMPERIAL: "/100yd",
}
