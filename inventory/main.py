from fastapi import FastAPI

from inventory.api.router import api_router
from inventory.api.routes import health
from inventory.core.config import get_settings


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    application = FastAPI(title=settings.app_name, debug=settings.debug)
    application.include_router(health.router)
    application.include_router(api_router, prefix="/api")
    return application


app = create_app()
