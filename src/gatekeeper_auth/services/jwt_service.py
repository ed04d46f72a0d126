"""HS256 implementation of the TokenService port.

Every token carries the identity claims plus ``iat``, ``exp`` and a random
``jti``. Verification hands back the identity claims only.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import jwt

from gatekeeper_auth.exceptions import InvalidTokenError
from gatekeeper_auth.ports import TokenService
from gatekeeper_auth.schemas import TokenPayload

if TYPE_CHECKING:
    from gatekeeper_config import Settings


class JWTService(TokenService):
    """Signs and checks identity tokens with a shared secret.

    The secret and lifetime are fixed for the life of the instance, so one
    instance can be shared by every request.

    Examples
    --------
    >>> tokens = JWTService(secret_key="a-long-random-secret", expires_in=timedelta(hours=2))
    >>> token = tokens.generate_token(TokenPayload(id=user_id, email="ada@x.io", name="Ada"))
    >>> tokens.verify_token(token).email
    'ada@x.io'
    """

    DEFAULT_EXPIRES_IN = timedelta(hours=2)
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
    ):
        """
        Parameters
        ----------
        secret_key
            HMAC signing secret. Anyone holding it can mint valid tokens.
        expires_in
            Lifetime applied to every token this instance mints
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if expires_in <= timedelta(0):
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> JWTService:
        return cls(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            expires_in=settings.jwt_expires_delta,
        )

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def generate_token(self, payload: TokenPayload) -> str:
        issued_at = datetime.now(tz=timezone.utc)
        claims = payload.to_claims() | {
            "iat": issued_at,
            "exp": issued_at + self._expires_in,
            "jti": uuid4().hex,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature and expiry and rebuild the identity claims.

        Raises
        ------
        InvalidTokenError
            With "Token has expired", "Invalid token: ..." or
            "Malformed token payload: ..." as the message
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return TokenPayload(
                id=UUID(str(claims["id"])),
                email=str(claims["email"]),
                name=str(claims["name"]),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
