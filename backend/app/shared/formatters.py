"""
Formatting utilities for display.

Used by the API and the CLI. The normalization engine itself only
formats durations (see durations.py) and bike speed.
"""

from .constants import UnitSystem, DISTANCE_UNITS, SPEED_UNITS


def format_speed(speed: float) -> str:
    """
    Format speed with one decimal place.

    Args:
        speed: Distance per hour

    Returns:
        Formatted string (e.g., '35.3')
    """
    return f"{speed:.1f}"


def format_speed_with_unit(speed: float, unit_system: UnitSystem) -> str:
    """Format speed with unit suffix (e.g., '35.3 km/h')."""
    return f"{format_speed(speed)} {SPEED_UNITS[unit_system]}"


def format_distance(distance: float, unit_system: UnitSystem) -> str:
    """
    Format distance with unit suffix.

    Args:
        distance: Distance in the unit system's unit
        unit_system: Metric (km) or imperial (mi)

    Returns:
        Formatted string (e.g., '21.1 km', '90 km', '0.93 mi')
    """
    return f"{distance:g} {DISTANCE_UNITS[unit_system]}"


def format_percent(percent: float) -> str:
    """Format a timeline share (e.g., '54.9%')."""
    return f"{percent:.1f}%"
