"""Status Service: health check API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from status_service.config import settings
from status_service.api.routes_status import router as status_router
from status_service.api.routes_hello import router as hello_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSIONS = (1, 2)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"status service running on PORT {settings.port}")
    yield
    logger.info("status service shutting down...")


def create_app(version: int = 2) -> FastAPI:
    """Build the service app.

    Version 1 serves /status only; version 2 adds /helloWorld.
    """
    if version not in VERSIONS:
        raise ValueError(f"Unknown app version: {version}")

    app = FastAPI(
        title="Status Service",
        description="Health check API.",
        version=f"{version}.0.0",
        lifespan=lifespan,
    )

    # CORS: any origin, no credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount routers
    app.include_router(status_router)
    if version >= 2:
        app.include_router(hello_router)

    return app


app = create_app()
