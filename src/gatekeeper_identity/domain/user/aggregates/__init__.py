"""User aggregate."""

from gatekeeper_identity.domain.user.aggregates.user import User

__all__ = ["User"]
