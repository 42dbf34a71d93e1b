"""
Standards Routes

Endpoints for the Olympic / 70.3 / Full distance tables.
"""

from fastapi import APIRouter, HTTPException

from app.shared.constants import UnitSystem
from app.shared.errors import UnknownStandardError
from app.features.triathlon.schemas import StandardSchema
from app.features.triathlon.standards import get_standard, list_standards

router = APIRouter()


@router.get("", response_model=list[StandardSchema])
def get_standards(unit_system: UnitSystem = UnitSystem.METRIC):
    """List standard distances for a unit system, shortest first."""
    return [StandardSchema.from_standard(s) for s in list_standards(unit_system)]


@router.get("/{unit_system}/{tier}", response_model=StandardSchema)
def get_single_standard(unit_system: str, tier: str):
    """Get one standard, e.g. /standards/imperial/70.3."""
    try:
        standard = get_standard(tier, unit_system)
    except UnknownStandardError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())
    return StandardSchema.from_standard(standard)
