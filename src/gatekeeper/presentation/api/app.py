"""FastAPI application factory.

``create_app`` wires one application instance: settings, the database
engine, the shared hasher and token service, the auth router and the error
handlers. Routes live under /api/v1; /health stays unversioned.
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gatekeeper.presentation.api.dependencies import (
    create_engine,
    create_session_maker,
)
from gatekeeper.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from gatekeeper.presentation.api.routers import auth_router
from gatekeeper_auth import JWTService, PasswordHashingService
from gatekeeper_config.settings import Settings, get_settings
from gatekeeper_identity.infrastructure.persistence.sqlalchemy import IdentityBase

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

OWN_LOGGERS = ("gatekeeper", "gatekeeper_auth", "gatekeeper_identity")
NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "uvicorn.access")


def _configure_logging(level_name: str) -> None:
    """Send log records to stdout; our packages at ``level_name``, libraries at WARNING.

    Root handlers that already exist are left alone, so calling this again
    (one call per application) only adjusts logger levels.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
    )
    for name in OWN_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the schema and warm the hasher on startup; release the pool on shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s", settings.app_name, API_VERSION)

    async with app.state.engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)
    logger.info("Database schema ready")

    # The first dummy comparison hashes the dummy secret; do it before traffic
    await asyncio.to_thread(app.state.password_service.verify_dummy, "")

    yield

    await app.state.engine.dispose()
    logger.info("%s API stopped, database connections closed", settings.app_name)


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a configured application.

    Parameters
    ----------
    settings
        Settings to use instead of the cached process-wide ones; tests pass
        their own here.

    Returns
    -------
    FastAPI application whose shared services live on ``app.state``.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration, password login and token verification.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    app.state.password_service = PasswordHashingService(rounds=settings.bcrypt_rounds)
    app.state.jwt_service = JWTService.from_settings(settings)

    if settings.api_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api_cors_origins,
            allow_methods=["POST", "GET"],
            allow_headers=["Authorization", "Content-Type"],
        )

    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return app
