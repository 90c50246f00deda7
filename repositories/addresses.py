"""Address repository."""

from models.address import Address

from .base import BaseRepository


class AddressRepository(BaseRepository[Address]):
    model = Address
