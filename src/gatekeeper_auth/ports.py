"""Abstract interfaces for the password hasher and the token service.

The application layer depends on these contracts only; concrete
implementations live in gatekeeper_auth.services.
"""

from abc import ABC, abstractmethod

from gatekeeper_auth.schemas import TokenPayload


class PasswordHasher(ABC):
    """One-way salted hashing and comparison of secrets."""

    _DUMMY_SECRET = "gatekeeper-timing-dummy"  # NOQA: S105

    _dummy_hash: str | None = None

    def verify_dummy(self, password: str) -> bool:
        """Run a full comparison against a throwaway hash. Always False.

        Called when there is no stored hash to compare against, so a login
        for an unknown email costs the same as one with a wrong password.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(self._DUMMY_SECRET)
        self.verify(password, self._dummy_hash)
        return False

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a non-empty plaintext password with a fresh salt."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Must return False (never raise) for a mismatch or a malformed hash.
        """


class TokenService(ABC):
    """Minting and verification of signed, time-bounded identity tokens."""

    @abstractmethod
    def generate_token(self, payload: TokenPayload) -> str:
        """Sign the payload together with issued-at and expiry claims."""

    @abstractmethod
    def verify_token(self, token: str) -> TokenPayload:
        """
        Validate signature and expiry and return the identity payload.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, or malformed
        """
