"""
Shared utilities (NOT business logic).

Usage:
    from app.shared import parse_duration, format_duration
    from app.shared.errors import NormalizerError
"""
from .durations import (
    parse_duration,
    format_duration,
    is_formattable,
)
from .formatters import (
    format_speed,
    format_speed_with_unit,
    format_distance,
    format_percent,
)
from .constants import (
    Tier,
    UnitSystem,
    Discipline,
    TIER_ORDER,
    STANDARD_TRANSITION_MINUTES,
    SWIM_PACE_DIVISOR,
    DISTANCE_UNITS,
    SPEED_UNITS,
    SWIM_PACE_UNITS,
)
from .errors import (
    NormalizerError,
    DurationParseError,
    InvalidDurationError,
    InvalidDistanceError,
    MissingFieldError,
    UnknownStandardError,
    UnknownFieldError,
)

__all__ = [
    # durations
    "parse_duration",
    "format_duration",
    "is_formattable",
    # formatters
    "format_speed",
    "format_speed_with_unit",
    "format_distance",
    "format_percent",
    # constants
    "Tier",
    "UnitSystem",
    "Discipline",
    "TIER_ORDER",
    "STANDARD_TRANSITION_MINUTES",
    "SWIM_PACE_DIVISOR",
    "DISTANCE_UNITS",
    "SPEED_UNITS",
    "SWIM_PACE_UNITS",
    # errors
    "NormalizerError",
    "DurationParseError",
    "InvalidDurationError",
    "InvalidDistanceError",
    "MissingFieldError",
    "UnknownStandardError",
    "UnknownFieldError",
]
