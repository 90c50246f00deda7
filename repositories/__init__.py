"""Per-entity data access."""

from .addresses import AddressRepository
from .base import BaseRepository
from .users import UserRepository
from .verifications import VerificationRepository

__all__ = [
    "AddressRepository",
    "BaseRepository",
    "UserRepository",
    "VerificationRepository",
]
