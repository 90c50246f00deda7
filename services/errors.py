"""Typed errors raised by the account services.

The services never decide HTTP status codes; each blueprint maps these
errors onto its own responses (see ``routes.auth`` and ``routes.users``).
"""


class AccountError(Exception):
    """Base class for all account service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(AccountError):
    """A user, address or verification record does not exist."""


class AlreadyExists(AccountError):
    """A user with the given email is already registered."""


class InvalidCredentials(AccountError):
    """Email/password pair did not match. Never says which part was wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InvalidOrExpired(AccountError):
    def __init__(self, message: str = "Invalid or expired verification code"):
        super().__init__(message)


class AlreadyVerified(AccountError):
    def __init__(self, message: str = "User is already verified"):
        super().__init__(message)


class Forbidden(AccountError):
    """The caller may not act on another user's account."""


class ValidationError(AccountError):
    """A required field is missing or malformed."""
