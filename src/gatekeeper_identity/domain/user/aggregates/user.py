"""User aggregate for identity concerns only."""

from typing import Union
from uuid import UUID, uuid4

from gatekeeper_auth.schemas import TokenPayload
from gatekeeper_identity.domain.user.exceptions import InvalidUserNameError
from gatekeeper_identity.domain.user.value_objects import Email


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidUserNameError
    return cleaned


class User:
    """
    User aggregate root.

    The id is assigned once and never changes; the email is immutable.
    The display name may only change through ``update_name``. The password
    hash stays inside the core and is never part of an outward payload.
    """

    def __init__(
        self,
        email: Union[str, Email],
        name: str,
        password_hash: str | None = None,
        is_active: bool = True,
        id: UUID | None = None,
    ):
        self._email = Email.of(email)
        self._name = _clean_name(name)
        self._password_hash = password_hash
        self._is_active = is_active
        self._id = id or uuid4()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    @property
    def has_password(self) -> bool:
        return bool(self._password_hash)

    @property
    def is_active(self) -> bool:
        return self._is_active

    def update_name(self, new_name: str) -> None:
        """Rename the user. Raises InvalidUserNameError for a blank name."""
        self._name = _clean_name(new_name)

    def token_payload(self) -> TokenPayload:
        """Identity claims for this user (no hash, no status flag)."""
        return TokenPayload(id=self._id, email=self.email, name=self._name)

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: str,
        password_hash: str,
        id: UUID | None = None,
    ) -> "User":
        return cls(
            email=email,
            name=name,
            password_hash=password_hash,
            is_active=True,
            id=id or uuid4(),
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str,
        password_hash: str | None,
        is_active: bool,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password_hash=password_hash,
            is_active=is_active,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
