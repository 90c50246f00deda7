"""Database initialization and model exports."""

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

# Import models to register them with SQLAlchemy metadata.
from .address import Address  # noqa: E402,F401
from .user import User, user_addresses  # noqa: E402,F401
from .verification import Verification  # noqa: E402,F401

__all__ = [
    "db",
    "Address",
    "User",
    "user_addresses",
    "Verification",
]
