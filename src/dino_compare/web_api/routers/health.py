"""
Health Check Router
==================
Endpoints for health checks and readiness checks.
"""
from fastapi import APIRouter, HTTPException

from dino_compare import __version__
from dino_compare.errors import DataSourceError
from dino_compare.sources import load_source_records
from dino_compare.web_api.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
def readiness_check():
    """
    Readiness check endpoint.
    Returns ready once the dinosaur data source loads and validates.
    """
    try:
        records = load_source_records(
            settings.DINO_DATA_SOURCE, timeout=settings.DATA_TIMEOUT
        )
    except DataSourceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"status": "ready", "records": len(records)}
