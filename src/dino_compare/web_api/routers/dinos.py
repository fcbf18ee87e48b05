"""
Dinosaurs Router
================
Read-only access to the dinosaur records.
"""
from typing import List

from fastapi import APIRouter, HTTPException

from dino_compare import api as core_api
from dino_compare.errors import DataSourceError
from dino_compare.model import Units
from dino_compare.web_api.config import settings
from dino_compare.web_api.schemas.compare import DinoOut

router = APIRouter()


@router.get("/", response_model=List[DinoOut])
def list_dinos(units: Units = Units.IMPERIAL):
    """
    List every dinosaur record converted to **units**.
    """
    try:
        records = core_api.list_dinosaurs(
            units,
            source=settings.DINO_DATA_SOURCE,
            timeout=settings.DATA_TIMEOUT,
        )
    except DataSourceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [DinoOut(**r.to_dict()) for r in records]
