"""
Normalization Routes

Endpoint for scaling a recorded race onto a standard distance.
"""

import logging

from fastapi import APIRouter, HTTPException

from app.shared.errors import NormalizerError
from app.features.triathlon import normalize
from app.features.triathlon.schemas import ErrorSchema, NormalizeRequest, NormalizeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=NormalizeResponse,
    responses={422: {"model": ErrorSchema, "description": "Invalid race data"}},
)
def normalize_race(request: NormalizeRequest):
    """
    Normalize a race to a standard distance.

    Segment times are scaled at constant pace to the standard distances
    of the selected tier; transitions are fixed at 2:00 each.
    """
    try:
        result = normalize(request.to_race_input(), request.tier, request.unit_system)
    except NormalizerError as e:
        logger.info(f"Rejected normalization request: {e.kind} ({e.field})")
        raise HTTPException(status_code=422, detail=e.to_dict())

    return NormalizeResponse.from_result(result)
