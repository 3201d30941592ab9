"""Health and metrics endpoints."""

from fastapi import APIRouter, Depends

from vcompass.config import SERVICE_NAME
from vcompass.engine import CampusEngine
from vcompass.models import HealthStatus
from vcompass.routes.questions import get_engine

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthStatus, response_model_by_alias=True)
async def health(engine: CampusEngine = Depends(get_engine)):
    return {
        "status": "ok",
        "name": SERVICE_NAME,
        "hasGemini": engine.refiner_configured,
        "documents": len(engine.snapshot),
    }


@router.get("/stats")
async def stats(engine: CampusEngine = Depends(get_engine)):
    return engine.metrics.get_stats()
