"""
FastAPI application factory.

* Loads the bundled parking dataset at startup (fails fast if malformed).
* Starts the one-time location fetch in the background; stops it on
  shutdown.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from parking_map.api.dependencies import (
    get_geolocation_provider,
    get_repository,
    get_view_session,
)
from parking_map.api.middleware import limiter
from parking_map.api.routes import admin, location, parkings, view
from parking_map.config import settings
from parking_map.workers import locator as _locator

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the dataset and start locating the user; stop on shutdown."""
    repo = get_repository()
    logger.info("Parking dataset ready (%d records)", len(repo))
    await _locator.start_location_fetch(
        get_view_session(),
        get_geolocation_provider(),
        timeout=settings.location_timeout_seconds,
    )
    yield
    await _locator.stop_location_fetch()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Parking Map API",
        description=(
            "Shows parkings from a bundled dataset on a map, locates the "
            "user and finds the three nearest parkings to the user or to "
            "an address."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(parkings.router, prefix="/api/v1")
    app.include_router(view.router, prefix="/api/v1")
    app.include_router(location.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
