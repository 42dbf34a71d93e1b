"""
Duration codec for race segment times.

Parses user-entered times ("33:00", "2:33:00", "45") into minutes and
formats minutes back into "M:SS" / "H:MM:SS" strings.
"""

import math
import re
from typing import Optional

from .errors import DurationParseError


SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60

_INT = r"\d+"
_SECONDS = r"\d+(?:\.\d+)?"

MM_SS_PATTERN = re.compile(rf"^({_INT}):({_SECONDS})$")
HH_MM_SS_PATTERN = re.compile(rf"^({_INT}):({_INT}):({_SECONDS})$")
BARE_MINUTES_PATTERN = re.compile(r"^\d+(?:\.\d+)?$")


def parse_duration(text: Optional[str], field: Optional[str] = None) -> float:
    """
    Parse a duration string to minutes.

    Formats:
        ""          → 0.0
        "33:00"     → 33.0     (mm:ss)
        "1:28:30"   → 88.5     (hh:mm:ss)
        "45"        → 45.0     (bare minutes)

    Args:
        text: Duration text, may be empty or None
        field: Form field name, used in the error message

    Returns:
        Duration in minutes

    Raises:
        DurationParseError: If the text matches none of the formats
            or the value is not a finite number.
            A valid zero ("", "0", "0:00") never raises.
    """
    if text is None:
        return 0.0

    value = text.strip()
    if not value:
        return 0.0

    parts = value.split(":")

    try:
        if len(parts) == 2:
            m = MM_SS_PATTERN.match(value)
            if not m:
                raise DurationParseError(text, field)
            minutes, seconds = int(m.group(1)), float(m.group(2))
            result = minutes + seconds / SECONDS_PER_MINUTE
        elif len(parts) == 3:
            m = HH_MM_SS_PATTERN.match(value)
            if not m:
                raise DurationParseError(text, field)
            hours, minutes, seconds = int(m.group(1)), int(m.group(2)), float(m.group(3))
            result = hours * MINUTES_PER_HOUR + minutes + seconds / SECONDS_PER_MINUTE
        else:
            # Any other shape is a bare number of minutes
            if not BARE_MINUTES_PATTERN.match(value):
                raise DurationParseError(text, field)
            result = float(value)
    except (OverflowError, ValueError):
        # int() digit limit, or an int too large to convert to float
        raise DurationParseError(text, field) from None

    # Bare digit runs too long for a float come back as inf
    if not math.isfinite(result):
        raise DurationParseError(text, field)
    return result


def is_formattable(minutes: float) -> bool:
    """True if minutes can be rendered, i.e. its seconds count is finite."""
    return math.isfinite(minutes * SECONDS_PER_MINUTE)


def format_duration(minutes: float) -> str:
    """
    Format minutes as "M:SS" or "H:MM:SS".

    Seconds are rounded half-up first, then carried into minutes and
    hours, so the seconds field is always 00-59.

    33.0     → "33:00"
    5.5      → "5:30"
    59.9999  → "1:00:00"
    278.0    → "4:38:00"
    """
    if not is_formattable(minutes):
        raise ValueError(f"Cannot format non-finite duration: {minutes}")

    total_seconds = int(math.floor(abs(minutes) * SECONDS_PER_MINUTE + 0.5))
    sign = "-" if minutes < 0 and total_seconds > 0 else ""

    hours, remainder = divmod(total_seconds, MINUTES_PER_HOUR * SECONDS_PER_MINUTE)
    mins, secs = divmod(remainder, SECONDS_PER_MINUTE)

    if hours:
        return f"{sign}{hours}:{mins:02d}:{secs:02d}"
    return f"{sign}{mins}:{secs:02d}"
