"""
Triathlon normalization module.

Usage:
    from app.features.triathlon import RaceInput, normalize
    from app.features.triathlon.standards import get_standard

Components:
- normalize: Scale a recorded race onto a standard distance
- STANDARDS: Read-only Olympic / 70.3 / Full tables (km and mi)
- RaceForm: Editable form state with explicit recompute
- load_race_file: YAML race files for the CLI
"""

from .standards import (
    Standard,
    STANDARDS,
    STANDARDS_KM,
    STANDARDS_MI,
    get_standard,
    list_standards,
)
from .models import (
    RaceInput,
    RaceMetadata,
    NormalizedResult,
    SegmentResult,
    TransitionResult,
    Timeline,
)
from .normalizer import normalize
from .form import RaceForm
from .schemas import NormalizeRequest, NormalizeResponse, StandardSchema
from .race_file import RaceFile, load_race_file

__all__ = [
    # Standards
    "Standard",
    "STANDARDS",
    "STANDARDS_KM",
    "STANDARDS_MI",
    "get_standard",
    "list_standards",
    # Models
    "RaceInput",
    "RaceMetadata",
    "NormalizedResult",
    "SegmentResult",
    "TransitionResult",
    "Timeline",
    # Engine
    "normalize",
    "RaceForm",
    # Schemas
    "NormalizeRequest",
    "NormalizeResponse",
    "StandardSchema",
    # Race files
    "RaceFile",
    "load_race_file",
]
