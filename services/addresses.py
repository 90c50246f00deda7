"""Address records. Ownership is handled by the account service."""

from __future__ import annotations

from typing import Mapping

from models.address import ADDRESS_FIELDS, Address
from repositories import AddressRepository

from .errors import NotFound, ValidationError


def validate_address_fields(fields: Mapping | None, *, partial: bool = False) -> dict:
    """Return trimmed column values for the supplied address fields.

    Every field must be a non-empty string after trimming. With ``partial``
    only the fields present in ``fields`` are checked.
    """

    if not isinstance(fields, Mapping):
        raise ValidationError("Address data must be an object")

    errors = []
    values = {}
    for key, column in ADDRESS_FIELDS.items():
        if key not in fields:
            if not partial:
                errors.append(f"{key} is required")
            continue
        raw = fields[key]
        value = raw.strip() if isinstance(raw, str) else ""
        if not value:
            errors.append(f"{key} is required")
            continue
        values[column] = value

    if errors:
        raise ValidationError("; ".join(errors))
    return values


class AddressService:
    def __init__(self, addresses: AddressRepository | None = None):
        self.addresses = addresses or AddressRepository()

    def get(self, address_id: int) -> Address:
        address = self.addresses.get(address_id)
        if address is None:
            raise NotFound("Address not found")
        return address

    def create(self, fields: Mapping) -> Address:
        values = validate_address_fields(fields)
        return self.addresses.insert(Address(**values))

    def update(self, address_id: int, fields: Mapping) -> Address:
        address = self.get(address_id)
        for column, value in validate_address_fields(fields, partial=True).items():
            setattr(address, column, value)
        return self.addresses.save(address)

    def delete(self, address_id: int) -> None:
        self.addresses.delete(self.get(address_id))
