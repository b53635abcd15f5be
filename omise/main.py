"""FastAPI application entry point for the donation page.

Startup: read settings, configure logging, build the Omise client.
Shutdown: close the client's HTTP connections.

Run with: uvicorn omise.main:create_app --factory
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from omise.client import OmiseClient
from omise.config.settings import OmiseSettings
from omise.logging_config import configure_logging
from omise.middleware.error_handler import register_error_handlers
from omise.middleware.request_id import RequestIdMiddleware
from omise.routers.donations import create_donations_router
from omise.routers.health import create_health_router

logger = logging.getLogger(__name__)


def create_app(
    settings: OmiseSettings | None = None,
    client: OmiseClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Loads ``OmiseSettings`` eagerly so that a missing ``OMISE_SECRET_KEY``
    environment variable causes an immediate startup failure.
    """
    settings = settings or OmiseSettings()  # type: ignore[call-arg]
    configure_logging(settings.log_level)

    omise = client or OmiseClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Donation app started against %s", settings.api_url)
        yield
        omise.close()
        logger.info("Donation app shut down")

    app = FastAPI(
        title="Omise Donations",
        version="0.1.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router(account=omise.account))
    app.include_router(
        create_donations_router(
            charges=omise.charges,
            currency=settings.donation_currency,
        )
    )

    return app
