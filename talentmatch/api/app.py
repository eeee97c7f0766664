"""
FastAPI application for the TalentMatch matching service.
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from talentmatch import __version__
from talentmatch.api.dependencies import get_db_manager
from talentmatch.api.routes import candidates_router, jobs_router
from talentmatch.data.database import DatabaseManager, get_database_manager
from talentmatch.utils.config import get_settings
from talentmatch.utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {app.title} {__version__}")
    yield
    get_database_manager().close()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Build the FastAPI application with CORS and the matching routers."""
    settings = get_settings()

    app = FastAPI(
        title=settings.name,
        description=settings.description,
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(candidates_router)
    app.include_router(jobs_router)

    @app.get("/health")
    async def health_check() -> dict[str, Any]:
        return {"status": "healthy", "version": __version__}

    @app.get("/health/db")
    async def database_health(db: DatabaseManager = Depends(get_db_manager)) -> dict[str, Any]:
        if await db.ping_async():
            return {"status": "connected", "message": "MongoDB is connected"}
        return {"status": "disconnected", "message": "MongoDB is not reachable"}

    return app


app = create_app()
