"""Authentication router for user registration, login, and token verification."""

import logging

from fastapi import APIRouter, status

from gatekeeper.domain.shared.exceptions import UnauthorizedError
from gatekeeper.presentation.api.dependencies import (
    AuthService,
    BearerCredentials,
    DBSession,
)
from gatekeeper.presentation.api.schemas.auth import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    VerifyRequest,
    VerifyResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input (weak password)"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    logger.info("Received register request for %s", request.email)
    try:
        result = await auth_service.register(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return AuthResponse.from_result(result)


@router.post(
    "/login",
    summary="Login with email and password",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
) -> AuthResponse:
    logger.info("Received login request for %s", request.email)
    result = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return AuthResponse.from_result(result)


@router.post(
    "/verify",
    summary="Verify a token and obtain a fresh one",
    responses={
        200: {"description": "Token valid; a new token is returned"},
        401: {"model": ErrorResponse, "description": "Invalid or expired token"},
    },
)
async def verify(
    auth_service: AuthService,
    credentials: BearerCredentials,
    request: VerifyRequest | None = None,
) -> VerifyResponse:
    """
    Verify a token passed in the body or as an ``Authorization: Bearer`` header.

    The body takes precedence when both are present.
    """
    token = request.token if request is not None and request.token else None
    if token is None and credentials is not None:
        token = credentials.credentials

    if not token:
        msg = "No token provided"
        raise UnauthorizedError(msg)

    result = await auth_service.verify(token)
    return VerifyResponse.from_result(result)
