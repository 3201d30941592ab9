"""Data reload endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from vcompass.engine import CampusEngine, ReloadError
from vcompass.models import ReloadResult
from vcompass.routes.questions import get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["admin"])


@router.post("/reload", response_model=ReloadResult, response_model_exclude_none=True)
def reload(engine: CampusEngine = Depends(get_engine)):
    try:
        count = engine.reload()
    except ReloadError as e:
        logger.error(f"Reload failed | error={e}")
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})
    return {"ok": True, "count": count}
