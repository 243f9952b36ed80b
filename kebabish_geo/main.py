"""Kebabish geocoding — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from kebabish_geo.adapters.geocoder.nominatim_adapter import NominatimAdapter
from kebabish_geo.adapters.persistence.branch_repository import InMemoryBranchRepository
from kebabish_geo.config import settings
from kebabish_geo.infrastructure.api.routes_branches import router as branches_router
from kebabish_geo.infrastructure.api.routes_geocoding import router as geocoding_router
from kebabish_geo.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    app.state.geocoder = NominatimAdapter()
    app.state.branch_repo = InMemoryBranchRepository.from_file(settings.branches_path)
    logger.info("Geocoder ready (user agent '%s')", settings.geocoder_user_agent)
    yield
    await app.state.geocoder.aclose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Kebabish Pizza — Branch Geocoding",
        description="Address validation, geocoding and nearest-branch lookup",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(geocoding_router, prefix="/api")
    app.include_router(branches_router, prefix="/api")

    return app


app = create_app()
