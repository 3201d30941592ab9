"""FastAPI application entrypoint with campus engine lifecycle management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from vcompass import config
from vcompass.engine import CampusEngine, ReloadError
from vcompass.logging_config import setup_logging
from vcompass.refiner import GeminiRefiner
from vcompass.routes import admin_router, health_router, questions_router

logger = logging.getLogger(__name__)


def build_engine() -> CampusEngine:
    refiner = GeminiRefiner(
        api_key=config.GEMINI_API_KEY,
        model=config.GEMINI_MODEL,
        timeout=config.GEMINI_TIMEOUT,
        circuit_cooldown=config.GEMINI_CIRCUIT_COOLDOWN,
    )
    return CampusEngine(
        data_path=config.CAMPUS_DATA_PATH,
        refiner=refiner,
        confidence_threshold=config.CONFIDENCE_THRESHOLD,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    if getattr(app.state, "engine", None) is None:
        app.state.engine = build_engine()
    try:
        app.state.engine.reload()
    except ReloadError as e:
        logger.error(f"Initial load failed, serving empty index | error={e}")
    yield


app = FastAPI(title="V-Compass", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(questions_router)
app.include_router(admin_router)


@app.get("/")
async def root():
    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
