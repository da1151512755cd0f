"""FastAPI application factory and entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
import uvicorn
from fastapi import FastAPI

from expo_stalls.catalog.cache import SessionCache
from expo_stalls.catalog.loader import CatalogLoader
from expo_stalls.config import Settings, load_settings
from expo_stalls.logging import configure_logging
from expo_stalls.routes import stalls, status, submissions
from expo_stalls.services.session import StallSession
from expo_stalls.submissions.client import SubmissionClient

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


def build_session(client: httpx.AsyncClient, settings: Settings) -> StallSession:
    """Wire loader, cache and submission client around a shared HTTP client."""
    loader = CatalogLoader(client, settings.catalog, settings.sheets)
    return StallSession(SessionCache(loader), SubmissionClient(client, settings.sheets))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    async with httpx.AsyncClient(timeout=settings.sheets.read_timeout) as client:
        app.state.session = build_session(client, settings)
        if app.state.session.demo_mode:
            logger.warning(
                "SHEETS_SCRIPT_URL is not set — edits are not loaded and submissions run in demo mode"
            )
        logger.info("Expo stalls API started — env=%s", settings.app.env)
        yield
    logger.info("Expo stalls API stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the application. Settings are loaded from the environment when omitted."""
    settings = settings or load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)

    app = FastAPI(title="Expo Stalls", lifespan=lifespan)
    app.state.settings = settings
    app.include_router(stalls.router)
    app.include_router(submissions.router)
    app.include_router(status.router)
    return app


def main() -> None:
    """Entry point for the ``expo-stalls`` command."""
    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.app.host, port=settings.app.port)


if __name__ == "__main__":
    main()
