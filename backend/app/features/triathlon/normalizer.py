"""
Race Normalizer

Scales a recorded triathlon onto a standard distance:
- Swim/bike/run times scaled linearly by standard / recorded distance
  (constant pace assumed)
- Transitions replaced by a fixed 2 minutes in the normalized total
- Swim pace, bike speed and run pace at the standard distance
- Timeline share of each segment

This is the main entry point for normalization. It is pure: the same
input always produces an equal result, nothing is stored.
"""

import logging
import math
from typing import Union

from app.shared.constants import (
    Discipline,
    Tier,
    UnitSystem,
    STANDARD_TRANSITION_MINUTES,
    SWIM_PACE_DIVISOR,
)
from app.shared.durations import is_formattable, parse_duration
from app.shared.errors import InvalidDistanceError, InvalidDurationError, MissingFieldError

from .models import (
    NormalizedResult,
    RaceInput,
    SegmentResult,
    Timeline,
    TransitionResult,
)
from .standards import Standard, get_standard


logger = logging.getLogger(__name__)


def _required_minutes(race: RaceInput, discipline: Discipline) -> float:
    """Parse a required segment time; blank and zero are rejected."""
    field = f"{discipline.value}_time"
    text = race.time(discipline)
    if not text.strip():
        raise MissingFieldError(field)

    minutes = parse_duration(text, field)
    if minutes <= 0:
        raise InvalidDurationError(f"{field} must be greater than zero", field)
    if not is_formattable(minutes):
        raise InvalidDurationError(f"{field} is too large", field)
    return minutes


def _transition_minutes(text: str, field: str) -> float:
    """Recorded transition time; blank defaults to the standard 2 minutes."""
    if not text.strip():
        return STANDARD_TRANSITION_MINUTES
    minutes = parse_duration(text, field)
    if not is_formattable(minutes):
        raise InvalidDurationError(f"{field} is too large", field)
    return minutes


def _scaled_minutes(actual_minutes: float, race: RaceInput, discipline: Discipline, standard: Standard) -> float:
    """Scaled segment time; a distance ratio that overflows or underflows is rejected."""
    minutes = scale_time(actual_minutes, race.distance(discipline), standard.distance(discipline))
    if minutes <= 0 or not is_formattable(minutes):
        field = f"{discipline.value}_distance"
        raise InvalidDistanceError(f"{field} cannot be scaled to {standard.name}", field)
    return minutes


def scale_time(actual_minutes: float, input_distance: float, standard_distance: float) -> float:
    """
    Scale a segment time to the standard distance at constant pace.

    Formula: normalized = actual * (standard_distance / input_distance)

    Args:
        actual_minutes: Recorded time
        input_distance: Recorded distance, must be > 0 (RaceInput guarantees it)
        standard_distance: Target distance in the same unit

    Returns:
        Normalized time in minutes
    """
    return actual_minutes * (standard_distance / input_distance)


def swim_pace(normalized_minutes: float, standard: Standard) -> float:
    """Minutes per 100 (m) at the standard swim distance."""
    return normalized_minutes / (standard.swim * SWIM_PACE_DIVISOR[standard.unit_system])


def bike_speed(normalized_minutes: float, standard: Standard) -> float:
    """Distance per hour at the standard bike distance."""
    return standard.bike * 60 / normalized_minutes


def run_pace(normalized_minutes: float, standard: Standard) -> float:
    """Minutes per distance unit at the standard run distance."""
    return normalized_minutes / standard.run


def build_timeline(segment_minutes: list[float], total_minutes: float) -> Timeline:
    """
    Percent share of each of the five segments.

    All five are divided by the same total, so they sum to 100.
    """
    swim, t1, bike, t2, run = (m / total_minutes * 100 for m in segment_minutes)
    return Timeline(
        swim_percent=swim,
        t1_percent=t1,
        bike_percent=bike,
        t2_percent=t2,
        run_percent=run,
    )


def normalize(
    race: RaceInput,
    tier: Union[Tier, str] = Tier.HALF,
    unit_system: Union[UnitSystem, str] = UnitSystem.METRIC,
) -> NormalizedResult:
    """
    Normalize a recorded race to a standard distance.

    Args:
        race: Validated race input (distances > 0)
        tier: Target standard ("olympic", "70.3", "full")
        unit_system: "metric" or "imperial"; selects the standards table
                     and the swim pace convention

    Returns:
        NormalizedResult with per-segment times, pace/speed, totals and timeline

    Raises:
        UnknownStandardError: Unknown tier or unit system
        MissingFieldError: Swim/bike/run time left blank
        DurationParseError: A time could not be parsed (names the field)
        InvalidDurationError: Swim/bike/run time is zero, or a time is too large
            to total or format
        InvalidDistanceError: A distance ratio scales a segment to
            zero or to an unformattable time
    """
    standard = get_standard(tier, unit_system)

    actual = {d: _required_minutes(race, d) for d in Discipline}
    actual_t1 = _transition_minutes(race.t1_time, "t1_time")
    actual_t2 = _transition_minutes(race.t2_time, "t2_time")

    normalized = {
        d: _scaled_minutes(actual[d], race, d, standard)
        for d in Discipline
    }

    t1 = TransitionResult(minutes=STANDARD_TRANSITION_MINUTES, actual_minutes=actual_t1)
    t2 = TransitionResult(minutes=STANDARD_TRANSITION_MINUTES, actual_minutes=actual_t2)

    segment_minutes = [
        normalized[Discipline.SWIM],
        t1.minutes,
        normalized[Discipline.BIKE],
        t2.minutes,
        normalized[Discipline.RUN],
    ]
    total = sum(segment_minutes)
    actual_total = (
        actual[Discipline.SWIM] + actual_t1
        + actual[Discipline.BIKE] + actual_t2
        + actual[Discipline.RUN]
    )
    if not (is_formattable(total) and is_formattable(actual_total)):
        raise InvalidDurationError("Race total is too large")

    speed = bike_speed(normalized[Discipline.BIKE], standard)
    if not math.isfinite(speed):
        raise InvalidDurationError("bike_time is too short to compute a speed", "bike_time")

    swim = SegmentResult(
        discipline=Discipline.SWIM,
        distance=standard.swim,
        actual_minutes=actual[Discipline.SWIM],
        minutes=normalized[Discipline.SWIM],
        pace_minutes=swim_pace(normalized[Discipline.SWIM], standard),
    )
    bike = SegmentResult(
        discipline=Discipline.BIKE,
        distance=standard.bike,
        actual_minutes=actual[Discipline.BIKE],
        minutes=normalized[Discipline.BIKE],
        speed=speed,
    )
    run = SegmentResult(
        discipline=Discipline.RUN,
        distance=standard.run,
        actual_minutes=actual[Discipline.RUN],
        minutes=normalized[Discipline.RUN],
        pace_minutes=run_pace(normalized[Discipline.RUN], standard),
    )

    result = NormalizedResult(
        standard=standard,
        swim=swim,
        t1=t1,
        bike=bike,
        t2=t2,
        run=run,
        total_minutes=total,
        actual_total_minutes=actual_total,
        timeline=build_timeline(segment_minutes, total),
        metadata=race.metadata,
    )

    logger.debug(
        f"Normalized race to {standard.name} ({standard.unit_system.value}): "
        f"actual {result.actual_total}, normalized {result.total}"
    )
    return result
