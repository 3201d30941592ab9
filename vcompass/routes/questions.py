"""Campus question answering endpoint."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request

from vcompass.engine import CampusEngine
from vcompass.models import Answer, Question

router = APIRouter(prefix="/api", tags=["questions"])


async def get_engine(request: Request) -> CampusEngine:
    return request.app.state.engine


@router.post("/query", response_model=Answer, response_model_exclude_none=True, response_model_by_alias=True)
async def query(q: Optional[Question] = Body(None), engine: CampusEngine = Depends(get_engine)):
    return await engine.ask_async(q.question if q else None)
