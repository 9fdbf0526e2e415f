"""ridematch — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ridematch.infrastructure.api.dependencies import close_dependencies
from ridematch.infrastructure.api.routes_health import router as health_router
from ridematch.infrastructure.api.routes_ranking import router as ranking_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    yield
    close_dependencies()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title="ridematch — detour-based driver ranking",
        description="Rank drivers for a passenger by the extra distance of serving them",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(ranking_router, prefix="/api")

    return app


app = create_app()
