"""
Typed failures for race normalization.

All errors derive from NormalizerError (a ValueError), so callers that
only care about "bad input" can catch one type, while the API and CLI
can render field-specific feedback from `field` and `kind`.
"""

from typing import Optional


class NormalizerError(ValueError):
    """Base class for all normalization failures."""

    kind = "invalid_input"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "field": self.field,
            "error": self.kind,
            "message": self.message,
        }


class DurationParseError(NormalizerError):
    """Duration text is not mm:ss, hh:mm:ss or a bare number of minutes."""

    kind = "invalid_duration"

    def __init__(self, text: str, field: Optional[str] = None):
        self.text = text
        where = f" for {field}" if field else ""
        super().__init__(f"Invalid duration{where}: {text!r}", field)


class InvalidDurationError(NormalizerError):
    """Duration parsed fine but cannot be used (e.g. zero segment time)."""

    kind = "invalid_duration"


class InvalidDistanceError(NormalizerError):
    """Distance is zero, negative or not a finite number."""

    kind = "invalid_distance"


class MissingFieldError(NormalizerError):
    """A required field was left blank."""

    kind = "missing_field"

    def __init__(self, field: str):
        super().__init__(f"{field} is required", field)


class UnknownStandardError(NormalizerError):
    """Tier or unit system key does not exist in the standards table."""

    kind = "unknown_standard"


class UnknownFieldError(NormalizerError):
    """Form update names a field the race form does not have."""

    kind = "unknown_field"

    def __init__(self, field: str):
        super().__init__(f"Unknown race field: {field}", field)
