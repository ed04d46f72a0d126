"""Shared exceptions and error codes.

Every failure that crosses the service boundary is a GatekeeperError. The
error code is the tag callers branch on; the status and timestamp complete
the uniform error envelope sent to clients.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from gatekeeper.domain.shared.time import utc_now


class ErrorCode(str, Enum):
    """Machine-readable failure tags.

    Clients branch on these values, so existing members keep their spelling.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_CREDENTIALS: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.INTERNAL_ERROR: 500,
}


class GatekeeperError(Exception):
    """Base exception for all errors surfaced to callers.

    Attributes
    ----------
    message
        Text returned to the caller in the envelope
    code
        Failure tag, which also fixes the status
    details
        Extra context for logs; never part of the envelope
    timestamp
        When the failure was raised (UTC)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp: datetime = utc_now()

    @property
    def status(self) -> int:
        return ERROR_CODE_TO_STATUS[self.code]

    def to_envelope(self) -> dict[str, Any]:
        """Return the external error envelope (status, message, code, timestamp)."""
        return {
            "status": self.status,
            "message": self.message,
            "code": self.code.value,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationFailure(GatekeeperError):
    """Raised when input is malformed."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class InvalidCredentialsError(GatekeeperError):
    """Raised for an unknown email, a missing hash or a wrong password.

    The three cases share one message so callers cannot tell them apart.
    """

    DEFAULT_MESSAGE = "User/Password not valid"

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class UnauthorizedError(GatekeeperError):
    """Raised when a token is invalid, expired or malformed."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message, ErrorCode.UNAUTHORIZED)


class NotFoundError(GatekeeperError):
    """Raised when a requested record does not exist."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.NOT_FOUND, details)


class ConflictError(GatekeeperError):
    """Raised when a record with the same unique key already exists."""

    def __init__(
        self,
        message: str = "User already exists",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.CONFLICT, details)


class InternalError(GatekeeperError):
    """Raised when a collaborator fails unexpectedly."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.INTERNAL_ERROR, details)
