"""Account services wired to the current application."""

from datetime import timedelta

from flask import current_app

from .accounts import AccountService
from .addresses import AddressService, validate_address_fields
from .errors import (
    AccountError,
    AlreadyExists,
    AlreadyVerified,
    Forbidden,
    InvalidCredentials,
    InvalidOrExpired,
    NotFound,
    ValidationError,
)
from .verification import VerificationService, generate_code

__all__ = [
    "AccountError",
    "AccountService",
    "AddressService",
    "AlreadyExists",
    "AlreadyVerified",
    "Forbidden",
    "InvalidCredentials",
    "InvalidOrExpired",
    "NotFound",
    "ValidationError",
    "VerificationService",
    "account_service",
    "generate_code",
    "validate_address_fields",
    "verification_service",
]


def verification_service() -> VerificationService:
    """Build a verification service using the app's notifier and code TTL."""

    return VerificationService(
        current_app.extensions["notifier"],
        ttl=timedelta(seconds=current_app.config["VERIFICATION_CODE_TTL"]),
    )


def account_service() -> AccountService:
    return AccountService(AddressService(), verification_service())
