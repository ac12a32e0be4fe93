"""Main application entry point for the Clay Craft API."""

import logging

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from claycraft_api.api.admin_moderation import router as admin_moderation_router
from claycraft_api.api.appeals import router as appeals_router
from claycraft_api.api.reports import router as reports_router
from claycraft_api.config.settings import get_settings
from claycraft_api.database.connection import close_database
from claycraft_api.database.connection import db
from claycraft_api.database.connection import init_database
from claycraft_api.services.spam_detection_service import (
    validate_moderation_settings,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the pool and check moderation settings before serving."""
    await init_database()
    try:
        system_actor_pk = await validate_moderation_settings()
    except Exception:
        await close_database()
        raise
    logger.info(f"Automatic reports will be filed by {system_actor_pk}")
    yield
    await close_database()


def create_app() -> FastAPI:
    """Build the moderation API application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Moderation service for the Clay Craft gallery",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (reports_router, appeals_router, admin_moderation_router):
        app.include_router(router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict:
        """Report database reachability and pool usage."""
        db_healthy = await db.ping()
        pool_stats = db.pool_stats()

        return {
            "status": "ok" if db_healthy else "error",
            "database": {
                "healthy": db_healthy,
                "pool": pool_stats,
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "claycraft_api.main:app",
        host="0.0.0.0",  # nosec B104
        port=8000,
        reload=True,
        log_level="info",
    )
