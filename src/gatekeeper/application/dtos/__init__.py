"""Data Transfer Objects for the presentation layer.

DTOs decouple the transport from the domain model; none of them
carries a password hash.
"""

from gatekeeper.application.dtos.auth_result_dto import (
    AuthResult,
    UserDTO,
    VerifyResult,
)

__all__ = [
    "AuthResult",
    "UserDTO",
    "VerifyResult",
]
