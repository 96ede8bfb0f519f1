"""
Main FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kmlview import __version__
from kmlview.api.error_handlers import register_error_handlers
from kmlview.api.kml import router as kml_router
from kmlview.api.middleware import RequestCorrelationMiddleware
from kmlview.core.config import settings
from kmlview.core.logging_config import setup_logging
from kmlview.utils.version import format_version_info

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Configure logging on startup and log shutdown.
    """
    setup_logging(
        log_level="DEBUG" if settings.environment == "development" else "INFO",
        log_file=settings.log_file,
        json_logs=(settings.environment == "production"),
        enable_console=True,
    )
    logger.info(f"Starting KML Viewer API v{__version__} in {settings.environment} mode")

    yield

    logger.info("Shutting down KML Viewer API")


app = FastAPI(
    title="KML Viewer API",
    description="Upload KML files and inspect their geometries",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestCorrelationMiddleware)

register_error_handlers(app)

app.include_router(kml_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint returning API information.

    Returns:
        dict[str, str]: API information including name and version.
    """
    return format_version_info()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        dict[str, str]: Health status.
    """
    return {"status": "healthy"}
