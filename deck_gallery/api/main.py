"""FastAPI application for the HTML deck gallery.

This module initializes the FastAPI app with CORS middleware and routes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deck_gallery import __version__
from deck_gallery.api.routes import presentations
from deck_gallery.config.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info(f"Starting HTML Deck Gallery API (environment: {get_settings().environment})")
    yield
    logger.info("Shutting down HTML Deck Gallery API")


def create_app() -> FastAPI:
    """Build the FastAPI application from the current settings."""
    settings = get_settings()

    app = FastAPI(
        title="HTML Deck Gallery API",
        description="Upload, split, preview, edit and export HTML slide decks",
        version=__version__,
        lifespan=lifespan,
    )

    if settings.api.cors_enabled and settings.environment != "production":
        logger.info("Development mode: enabling CORS")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(presentations.router)

    @app.get("/api/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": __version__,
        }

    return app


app = create_app()
