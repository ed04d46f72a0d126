"""Auth schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Identity claims carried inside a token.

    Built fresh from a user at mint time and rebuilt by verification.
    Transport claims (issued-at, expiry, token id) are never part of it.

    Attributes
    ----------
    id
        The unique identifier of the user
    email
        The user's email address
    name
        The user's display name
    """

    id: UUID
    email: str
    name: str

    def to_claims(self) -> dict[str, str]:
        """Return the payload as JSON-serializable token claims."""
        return {"id": str(self.id), "email": self.email, "name": self.name}
