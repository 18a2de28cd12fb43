"""FastAPI application entrypoint."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdf_enhancer import __version__
from pdf_enhancer.api.errors import register_error_handlers
from pdf_enhancer.api.routers import documents, enhance, extract, health, models
from pdf_enhancer.config.settings import api_settings

logging.basicConfig(level=api_settings.log_level.upper())
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(
        title=api_settings.title,
        version=api_settings.version or __version__,
        description=api_settings.description or None,
        debug=api_settings.reload,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(extract.router, prefix="/api")
    app.include_router(enhance.router, prefix="/api")
    app.include_router(documents.router, prefix="/api")
    app.include_router(models.router, prefix="/api")
    return app


# Uvicorn entrypoint
app = create_app()
