"""Authentication service for user registration, login and token verification."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from uuid import uuid4

from gatekeeper.application.dtos import AuthResult, UserDTO, VerifyResult
from gatekeeper.domain.shared.exceptions import (
    ConflictError,
    GatekeeperError,
    InternalError,
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationFailure,
)
from gatekeeper_auth import InvalidTokenError
from gatekeeper_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    User,
)

if TYPE_CHECKING:
    from gatekeeper_auth import PasswordHasher, TokenService
    from gatekeeper_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for the credential workflows.

    Orchestrates gatekeeper_auth infrastructure (password hashing, JWT
    tokens) with the gatekeeper_identity User domain to provide:
    - User registration
    - Login with password
    - Token verification with refresh

    Holds no mutable state of its own, so one instance can serve any
    number of concurrent requests. bcrypt work is pushed to a worker
    thread to keep the event loop free.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHasher,
        jwt_service: TokenService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _auth_result(self, user: User) -> AuthResult:
        token = self._jwt_service.generate_token(user.token_payload())
        return AuthResult(user=UserDTO.from_user(user), token=token)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
    ) -> AuthResult:
        try:
            email_obj = Email(email)

            existing_user = await self._user_repo.find_by_email(email_obj)
            if existing_user is not None:
                msg = "User already exists"
                raise ConflictError(msg)

            password_hash = await asyncio.to_thread(
                self._password_service.hash,
                password,
            )

            user_id = uuid4()
            logger.debug("Generated user id: %s", user_id)
            user = User.create(email_obj, name, password_hash, id=user_id)

            saved_user = await self._user_repo.save(user)
            result = self._auth_result(saved_user)

        except GatekeeperError:
            raise
        except EmailAlreadyExistsError as e:
            # Lost a race with a concurrent registration for the same email
            msg = "User already exists"
            raise ConflictError(msg) from e
        except (InvalidEmailError, InvalidUserNameError) as e:
            raise ValidationFailure(str(e)) from e
        except Exception as e:
            logger.exception("Error during user registration: %s", e)
            raise InternalError(
                "An unexpected error occurred during registration.",
                details={"exception": type(e).__name__, "error": str(e)},
            ) from e

        logger.info("User registered: %s", result.user.id)
        return result

    async def login(
        self,
        email: str,
        password: str,
    ) -> AuthResult:
        try:
            user = await self._find_login_candidate(email)

            if user is None or not user.has_password:
                await asyncio.to_thread(self._password_service.verify_dummy, password)
                raise InvalidCredentialsError

            is_password_valid = await asyncio.to_thread(
                self._password_service.verify,
                password,
                user.password_hash,
            )
            if not is_password_valid:
                raise InvalidCredentialsError

            result = self._auth_result(user)

        except GatekeeperError:
            raise
        except Exception as e:
            logger.exception("Error during user login: %s", e)
            raise InternalError(
                "An unexpected error occurred during login.",
                details={"exception": type(e).__name__, "error": str(e)},
            ) from e

        logger.info("User logged in: %s", result.user.id)
        return result

    async def verify(self, token: str) -> VerifyResult:
        """Check a token and hand back its claims with a freshly minted token.

        The presented token is not revoked; it stays valid until it expires.
        """
        try:
            payload = self._jwt_service.verify_token(token)
            new_token = self._jwt_service.generate_token(payload)
        except InvalidTokenError as e:
            logger.info("Token verification failed: %s", e.message)
            raise UnauthorizedError(e.message) from e
        except Exception as e:
            logger.exception("Token verification failed: %s", e)
            raise UnauthorizedError from e

        logger.debug("Token refreshed for user: %s", payload.id)
        return VerifyResult(user=payload, token=new_token)

    async def _find_login_candidate(self, email: str) -> User | None:
        try:
            email_obj = Email(email)
        except InvalidEmailError:
            return None
        return await self._user_repo.find_by_email(email_obj)
