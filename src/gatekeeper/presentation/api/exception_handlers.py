"""Centralized exception handlers for the FastAPI application.

Every failure leaves the API in the same envelope, whichever layer raised
it.

Error Response Format:
    {
        "status": 400,
        "message": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE",
        "timestamp": "2024-01-01T12:00:00+00:00"
    }

Usage:
    from gatekeeper.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gatekeeper.domain.shared.exceptions import (
    ErrorCode,
    GatekeeperError,
    InternalError,
    UnauthorizedError,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

_HTTP_STATUS_TO_CODE: dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorCode.UNAUTHORIZED,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
}


def _create_error_response(exc: GatekeeperError) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(status_code=exc.status, content=exc.to_envelope())


def _format_validation_errors(errors: list[dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        # Drop the leading "body"/"query" segment
        loc = ".".join(str(p) for p in error.get("loc", ())[1:])
        msg = error.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(GatekeeperError)
    async def gatekeeper_exception_handler(
        request: Request,
        exc: GatekeeperError,
    ) -> JSONResponse:
        """Handle typed service failures with their own status and code."""
        log = logger.error if exc.status >= 500 else logger.warning  # NOQA: PLR2004
        log(
            "Request failed on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _create_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Reject malformed bodies with a 400 validation envelope."""
        message = _format_validation_errors(list(exc.errors()))
        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            message,
        )
        return _create_error_response(ValidationFailure(message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap framework HTTP errors (unknown route, bad method) in the envelope."""
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            error: GatekeeperError = UnauthorizedError(str(exc.detail))
        else:
            code = _HTTP_STATUS_TO_CODE.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
            error = GatekeeperError(str(exc.detail), code)
        response = JSONResponse(
            status_code=exc.status_code,
            content={**error.to_envelope(), "status": exc.status_code},
        )
        logger.debug(
            "HTTP %s on %s %s",
            exc.status_code,
            request.method,
            request.url.path,
        )
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the handlers above. Internal details never reach the client.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(InternalError("An internal error occurred"))
