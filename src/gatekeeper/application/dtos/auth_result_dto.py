"""DTOs returned by the credential workflows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from gatekeeper_auth.schemas import TokenPayload

if TYPE_CHECKING:
    from gatekeeper_identity.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """Sanitized user view: every field except the password hash."""

    id: UUID
    email: str
    name: str
    is_active: bool

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            is_active=user.is_active,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "email": self.email,
            "name": self.name,
            "isActive": self.is_active,
        }


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""

    user: UserDTO
    token: str

    def to_dict(self) -> dict:
        return {"user": self.user.to_dict(), "token": self.token}


@dataclass(frozen=True)
class VerifyResult:
    """Outcome of a successful verification: the claims plus a fresh token."""

    user: TokenPayload
    token: str

    def to_dict(self) -> dict:
        return {"user": self.user.to_claims(), "token": self.token}
