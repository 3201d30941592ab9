"""FastAPI routes package."""

from vcompass.routes.admin import router as admin_router
from vcompass.routes.health import router as health_router
from vcompass.routes.questions import router as questions_router

__all__ = ["admin_router", "health_router", "questions_router"]
