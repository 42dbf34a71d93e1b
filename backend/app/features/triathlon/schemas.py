"""
Triathlon normalization schemas.

Pydantic schemas for API request/response serialization.
"""

from pydantic import BaseModel, Field
from typing import Optional

from app.config import settings
from app.shared.constants import Tier, UnitSystem

from .models import NormalizedResult, RaceInput
from .standards import Standard


class StandardSchema(BaseModel):
    """One standard race distance."""
    tier: Tier
    name: str
    unit_system: UnitSystem
    swim: float
    bike: float
    run: float

    @classmethod
    def from_standard(cls, standard: Standard) -> "StandardSchema":
        return cls(**standard.to_dict())


class NormalizeRequest(BaseModel):
    """Request for race normalization."""
    tier: Tier = Field(default_factory=lambda: settings.default_tier)
    unit_system: UnitSystem = Field(default_factory=lambda: settings.default_unit_system)

    swim_distance: float = Field(..., gt=0)
    swim_time: str
    t1_time: str = ""
    bike_distance: float = Field(..., gt=0)
    bike_time: str
    t2_time: str = ""
    run_distance: float = Field(..., gt=0)
    run_time: str

    athlete_name: Optional[str] = None
    age: Optional[int] = None
    race_name: Optional[str] = None
    bike_power: Optional[float] = Field(default=None, description="Average power, W")
    bike_elevation: Optional[float] = Field(default=None, description="Elevation gain, m")

    def to_race_input(self) -> RaceInput:
        return RaceInput(
            swim_distance=self.swim_distance,
            swim_time=self.swim_time,
            bike_distance=self.bike_distance,
            bike_time=self.bike_time,
            run_distance=self.run_distance,
            run_time=self.run_time,
            t1_time=self.t1_time,
            t2_time=self.t2_time,
            athlete_name=self.athlete_name,
            age=self.age,
            race_name=self.race_name,
            bike_power=self.bike_power,
            bike_elevation=self.bike_elevation,
        )


class SegmentSchema(BaseModel):
    """Normalized swim/bike/run segment."""
    distance: float
    time: str
    minutes: float
    actual_minutes: float
    pace: Optional[str] = None
    speed: Optional[str] = None


class TransitionSchema(BaseModel):
    """Standardized transition."""
    time: str
    minutes: float
    actual_minutes: float


class TimelineSchema(BaseModel):
    """Share of the normalized total per segment, in percent."""
    swim_percent: float
    t1_percent: float
    bike_percent: float
    t2_percent: float
    run_percent: float


class MetadataSchema(BaseModel):
    """Athlete/race details echoed back unchanged."""
    athlete_name: Optional[str] = None
    age: Optional[int] = None
    race_name: Optional[str] = None
    bike_power: Optional[float] = None
    bike_elevation: Optional[float] = None


class NormalizeResponse(BaseModel):
    """Race normalized to a standard distance."""
    standard: StandardSchema
    swim: SegmentSchema
    t1: TransitionSchema
    bike: SegmentSchema
    t2: TransitionSchema
    run: SegmentSchema
    total: str = Field(..., description="Normalized total, H:MM:SS")
    total_minutes: float
    actual_total: str
    actual_total_minutes: float
    time_saved: str = Field(..., description="Absolute difference actual vs normalized")
    difference_minutes: float = Field(
        ..., description="Actual minus normalized; positive means the race took longer"
    )
    timeline: TimelineSchema
    metadata: MetadataSchema

    @classmethod
    def from_result(cls, result: NormalizedResult) -> "NormalizeResponse":
        return cls(**result.to_dict())


class ErrorSchema(BaseModel):
    """Typed normalization failure."""
    field: Optional[str] = None
    error: str
    message: str
