"""Email value object.

Provides validated, normalized email addresses. The normalized form is
what the store indexes, so lookups are case-insensitive.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from gatekeeper_identity.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address.

    Syntax rules are the same ones ``EmailStr`` applies at the HTTP
    boundary; deliverability is not checked.
    """

    value: str

    def __post_init__(self) -> None:
        raw = (self.value or "").strip()
        if not raw:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        try:
            validated = validate_email(raw, check_deliverability=False)
        except EmailNotValidError as e:
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg) from e

        # Whole address lower-cased: this is the uniqueness key
        object.__setattr__(self, "value", validated.normalized.lower())

    @classmethod
    def of(cls, email: "str | Email") -> "Email":
        return email if isinstance(email, Email) else cls(email)

    def __str__(self) -> str:
        return self.value
