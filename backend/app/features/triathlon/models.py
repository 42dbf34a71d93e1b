"""
Data models for race normalization (dataclasses, no DB dependency).

RaceInput is validated on construction, so a RaceInput that exists
always has strictly positive, finite distances. NormalizedResult and
its parts are frozen snapshots produced by the normalizer.
"""

from __future__ import annotations

import math
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Optional

from app.shared.constants import Discipline
from app.shared.durations import format_duration
from app.shared.errors import (
    InvalidDistanceError,
    MissingFieldError,
    NormalizerError,
    UnknownFieldError,
)
from app.shared.formatters import format_speed

from .standards import Standard


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_distance(value: Any, field_name: str) -> float:
    """
    Check that a distance is a finite number greater than zero.

    Raises:
        InvalidDistanceError: For zero, negative, NaN/inf or non-numeric values.
    """
    if not _is_number(value):
        raise InvalidDistanceError(f"{field_name} must be a number, got {value!r}", field_name)
    try:
        distance = float(value)
    except OverflowError:
        raise InvalidDistanceError(f"{field_name} is too large", field_name) from None
    if not math.isfinite(distance) or distance <= 0:
        raise InvalidDistanceError(f"{field_name} must be greater than zero, got {value}", field_name)
    return distance


@dataclass(frozen=True)
class RaceMetadata:
    """Athlete and race details. Passed through, never used in computation."""
    athlete_name: Optional[str] = None
    age: Optional[int] = None
    race_name: Optional[str] = None
    bike_power: Optional[float] = None      # Average power, W
    bike_elevation: Optional[float] = None  # Elevation gain, m

    def to_dict(self) -> dict:
        return {
            "athlete_name": self.athlete_name,
            "age": self.age,
            "race_name": self.race_name,
            "bike_power": self.bike_power,
            "bike_elevation": self.bike_elevation,
        }


@dataclass(frozen=True)
class RaceInput:
    """
    Recorded race: distances in the caller's unit system, raw time strings.

    Times are kept as entered ("33:00", "2:33:00"); the normalizer parses
    them so that parse errors can name the offending field.
    """
    swim_distance: float
    swim_time: str
    bike_distance: float
    bike_time: str
    run_distance: float
    run_time: str
    t1_time: str = ""
    t2_time: str = ""

    # Pass-through metadata
    athlete_name: Optional[str] = None
    age: Optional[int] = None
    race_name: Optional[str] = None
    bike_power: Optional[float] = None
    bike_elevation: Optional[float] = None

    def __post_init__(self):
        for discipline in Discipline:
            name = f"{discipline.value}_distance"
            object.__setattr__(self, name, validate_distance(getattr(self, name), name))

        for name in ("swim_time", "bike_time", "run_time", "t1_time", "t2_time"):
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, "")
            elif not isinstance(value, str):
                raise NormalizerError(f"{name} must be a string, got {value!r}", name)

        if self.age is not None and (not isinstance(self.age, int) or isinstance(self.age, bool)):
            raise NormalizerError(f"age must be an integer, got {self.age!r}", "age")
        for name in ("bike_power", "bike_elevation"):
            value = getattr(self, name)
            if value is not None and not _is_number(value):
                raise NormalizerError(f"{name} must be a number, got {value!r}", name)

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: dict) -> "RaceInput":
        """
        Build from a plain mapping (YAML file, form snapshot).

        Raises:
            UnknownFieldError: For keys that are not race fields.
            MissingFieldError / InvalidDistanceError: Via validation.
        """
        known = set(cls.field_names())
        for key in data:
            if key not in known:
                raise UnknownFieldError(key)
        for f in fields(cls):
            if f.default is MISSING and f.name not in data:
                raise MissingFieldError(f.name)
        return cls(**data)

    def distance(self, discipline: Discipline) -> float:
        return getattr(self, f"{Discipline(discipline).value}_distance")

    def time(self, discipline: Discipline) -> str:
        return getattr(self, f"{Discipline(discipline).value}_time")

    @property
    def metadata(self) -> RaceMetadata:
        return RaceMetadata(
            athlete_name=self.athlete_name,
            age=self.age,
            race_name=self.race_name,
            bike_power=self.bike_power,
            bike_elevation=self.bike_elevation,
        )


@dataclass(frozen=True)
class SegmentResult:
    """Normalized swim, bike or run segment."""
    discipline: Discipline
    distance: float               # Standard distance
    actual_minutes: float         # As recorded
    minutes: float                # Scaled to the standard distance
    pace_minutes: Optional[float] = None  # Swim: per 100, run: per unit
    speed: Optional[float] = None         # Bike: distance per hour

    @property
    def time(self) -> str:
        return format_duration(self.minutes)

    @property
    def pace(self) -> Optional[str]:
        if self.pace_minutes is None:
            return None
        return format_duration(self.pace_minutes)

    @property
    def speed_text(self) -> Optional[str]:
        if self.speed is None:
            return None
        return format_speed(self.speed)

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        data = {
            "distance": self.distance,
            "time": self.time,
            "minutes": round(self.minutes, 4),
            "actual_minutes": round(self.actual_minutes, 4),
        }
        if self.pace_minutes is not None:
            data["pace"] = self.pace
        if self.speed is not None:
            data["speed"] = self.speed_text
        return data


@dataclass(frozen=True)
class TransitionResult:
    """T1 or T2: fixed in the normalized total, recorded value kept for reference."""
    minutes: float
    actual_minutes: float

    @property
    def time(self) -> str:
        return format_duration(self.minutes)

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "minutes": self.minutes,
            "actual_minutes": round(self.actual_minutes, 4),
        }


@dataclass(frozen=True)
class Timeline:
    """Share of the normalized total taken by each segment, in percent."""
    swim_percent: float
    t1_percent: float
    bike_percent: float
    t2_percent: float
    run_percent: float

    @property
    def total_percent(self) -> float:
        return sum(self.as_list())

    def as_list(self) -> list[float]:
        """Percentages in race order: swim, T1, bike, T2, run."""
        return [
            self.swim_percent,
            self.t1_percent,
            self.bike_percent,
            self.t2_percent,
            self.run_percent,
        ]

    def to_dict(self) -> dict:
        return {
            "swim_percent": self.swim_percent,
            "t1_percent": self.t1_percent,
            "bike_percent": self.bike_percent,
            "t2_percent": self.t2_percent,
            "run_percent": self.run_percent,
        }


@dataclass(frozen=True)
class NormalizedResult:
    """Complete normalization result for one race against one standard."""
    standard: Standard
    swim: SegmentResult
    t1: TransitionResult
    bike: SegmentResult
    t2: TransitionResult
    run: SegmentResult
    total_minutes: float
    actual_total_minutes: float
    timeline: Timeline
    metadata: RaceMetadata = field(default_factory=RaceMetadata)

    @property
    def difference_minutes(self) -> float:
        """Actual minus normalized (positive: the recorded race took longer)."""
        return self.actual_total_minutes - self.total_minutes

    @property
    def time_saved_minutes(self) -> float:
        """Absolute difference between actual and normalized totals."""
        return abs(self.difference_minutes)

    @property
    def total(self) -> str:
        return format_duration(self.total_minutes)

    @property
    def actual_total(self) -> str:
        return format_duration(self.actual_total_minutes)

    @property
    def time_saved(self) -> str:
        return format_duration(self.time_saved_minutes)

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "standard": self.standard.to_dict(),
            "swim": self.swim.to_dict(),
            "t1": self.t1.to_dict(),
            "bike": self.bike.to_dict(),
            "t2": self.t2.to_dict(),
            "run": self.run.to_dict(),
            "total": self.total,
            "total_minutes": round(self.total_minutes, 4),
            "actual_total": self.actual_total,
            "actual_total_minutes": round(self.actual_total_minutes, 4),
            "time_saved": self.time_saved,
            "difference_minutes": round(self.difference_minutes, 4),
            "timeline": self.timeline.to_dict(),
            "metadata": self.metadata.to_dict(),
        }
