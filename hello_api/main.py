"""FastAPI application entrypoint."""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.routes.hello import API_VERSION, router as hello_router
from .api.routes.status import router as status_router
from .core.config import get_settings
from .core.logging import configure_logging, get_logger


def create_app() -> FastAPI:
    """Application factory used by ASGI servers."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI):  # noqa: ARG001 - FastAPI lifespan signature
        logger.info("service_started", service=settings.app_name, version=API_VERSION)
        try:
            yield
        finally:
            logger.info("service_stopped", service=settings.app_name)

    app = FastAPI(title=settings.app_name, version=API_VERSION, lifespan=lifespan)

    app.include_router(status_router)
    app.include_router(hello_router)

    return app


app = create_app()
