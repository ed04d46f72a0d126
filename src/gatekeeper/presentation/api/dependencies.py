"""FastAPI dependency injection.

Shared singletons (engine, session maker, hasher, token service) are built
once per application in ``create_app`` and kept on ``app.state``; the
functions below hand them to request handlers.
"""

import logging
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gatekeeper.application.services import AuthenticationService
from gatekeeper_auth import JWTService, PasswordHashingService
from gatekeeper_config.settings import Settings
from gatekeeper_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT bearer tokens; verify also accepts a body token
security = HTTPBearer(auto_error=False)


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async database engine for an application.

    For file-based SQLite URLs the parent directory is created first.

    Parameters
    ----------
    settings
        Application settings carrying ``database_url``

    Returns
    -------
    AsyncEngine instance
    """
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Creating database engine for %s", url.render_as_string(hide_password=True))
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
        hide_parameters=True,  # Bound values stay out of error text
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the application's pool.
    Routers commit or roll back explicitly.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None,
    Depends(security),
]


async def get_authentication_service(
    session: DBSession,
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> AuthenticationService:
    """
    Get the authentication service for the current request.

    The repository is bound to the request session, so the router decides
    when the registration is committed.
    """
    user_repo = UserRepositorySQLAlchemy(session)
    return AuthenticationService(
        user_repository=user_repo,
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
