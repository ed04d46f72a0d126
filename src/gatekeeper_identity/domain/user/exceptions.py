"""Exceptions raised by the user domain and its store.

The engine translates these into the public error taxonomy; they never
reach a client as-is.
"""


class InvalidEmailError(ValueError):
    """The address is empty or not shaped like user@domain.tld."""


class InvalidUserNameError(ValueError):
    """The display name is blank once surrounding whitespace is removed."""

    def __init__(self, message: str = "User name cannot be empty.") -> None:
        super().__init__(message)


class EmailAlreadyExistsError(Exception):
    """The store already holds a user with this email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"A user with email {email} already exists")


class UserNotFoundError(Exception):
    """No stored user has the given id."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"No user with id {user_id}")
