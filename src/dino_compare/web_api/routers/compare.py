"""
Compare Router
==============
Endpoints for comparing a profile against the dinosaurs.
"""
import logging

from fastapi import APIRouter, HTTPException

from dino_compare import api as core_api
from dino_compare.errors import DataSourceError, ProfileValidationError
from dino_compare.web_api.config import settings
from dino_compare.web_api.schemas.compare import CompareRequest, CompareResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=CompareResponse)
def run_compare(request: CompareRequest):
    """
    Compare a profile against every dinosaur.

    - **name**: shown on the human tile; must not be empty
    - **height** or **feet**/**inches**: must be at least 1
    - **weight**: must be at least 1
    """
    profile = core_api.build_profile(
        name=request.name,
        diet=request.diet,
        units=request.units,
        weight=request.weight,
        height=request.height,
        feet=request.feet,
        inches=request.inches,
    )

    try:
        result = core_api.compare_profile(
            profile,
            source=settings.DINO_DATA_SOURCE,
            timeout=settings.DATA_TIMEOUT,
        )
    except ProfileValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except DataSourceError as e:
        logger.error("Comparison failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))

    return CompareResponse(**result.to_dict())
