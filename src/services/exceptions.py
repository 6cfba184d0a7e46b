"""Shared exceptions for service layer operations."""


class EmailAlreadyExistsError(Exception):
    """Raised when signing up (or changing email) to an email another account already uses."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentialsError(Exception):
    """
    Raised when signin fails.

    Used for both an unknown email and a wrong password so that callers
    cannot tell which accounts exist.
    """

    def __init__(self) -> None:
        super().__init__("Invalid email or password")
