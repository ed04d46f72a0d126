"""Exceptions raised by the hashing and token services.

The credential engine catches these and maps them to its own errors.
"""


class AuthError(Exception):
    """Root of the gatekeeper_auth exception tree; ``message`` is the reason."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(message)


class InvalidTokenError(AuthError):
    """The token failed signature, expiry or claim checks."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
