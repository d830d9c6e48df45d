"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

from fastapi import FastAPI

from speciesgate.api.routes import router
from speciesgate.client.classifier import ClassificationClient
from speciesgate.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: initialize on startup, clean up on shutdown."""
    settings = get_settings()
    app.state.settings = settings

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    logger.info(
        "Starting SpeciesGate (model_server=%s%s, threshold=%.2f, overall_timeout=%ss)",
        settings.model_server_url,
        settings.classify_path,
        settings.confidence_threshold,
        settings.overall_timeout,
    )

    classifier = ClassificationClient(settings)
    app.state.classifier = classifier

    logger.info("SpeciesGate ready")
    yield

    logger.info("Shutting down SpeciesGate")
    await classifier.aclose()
    logger.info("SpeciesGate shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title="SpeciesGate",
        description="Confidence-gated adapter for a remote animal classification model server",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.include_router(router)
    return application


app = create_app()
