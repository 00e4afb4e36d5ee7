import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager

from mapnav import __version__
from mapnav.api.v1.routes.health import router as health_router
from mapnav.api.v1.routes.route import router as route_router
from mapnav.config import settings
from mapnav.infrastructure.external_apis.http_client import close_shared_client

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting up map navigation service...")
    if not settings.GOOGLE_MAPS_API_KEY:
        logger.warning("GOOGLE_MAPS_API_KEY not set - Google Maps requests will be rejected")

    yield

    # Shutdown
    logger.info("Shutting down map navigation service...")
    await close_shared_client()


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    app = FastAPI(
        title="Map Navigation",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(route_router, prefix="/api/v1")
    app.include_router(health_router, prefix="/api/v1")
    return app


app = create_app()


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
