"""Shared domain building blocks."""

from gatekeeper.domain.shared.exceptions import (
    ERROR_CODE_TO_STATUS,
    ConflictError,
    ErrorCode,
    GatekeeperError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    ValidationFailure,
)
from gatekeeper.domain.shared.time import utc_now

__all__ = [
    "ERROR_CODE_TO_STATUS",
    "ConflictError",
    "ErrorCode",
    "GatekeeperError",
    "InternalError",
    "InvalidCredentialsError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationFailure",
    "utc_now",
]
