"""User accounts and their owned address sets."""

from __future__ import annotations

import logging
from typing import Mapping

from flask_jwt_extended import create_access_token

from models.address import Address
from models.user import User
from repositories import UserRepository

from .addresses import AddressService
from .errors import AlreadyExists, InvalidCredentials, NotFound, ValidationError
from .verification import VerificationService

logger = logging.getLogger(__name__)

# JSON field name -> column name
PROFILE_FIELDS = {
    "email": "email",
    "firstName": "first_name",
    "lastName": "last_name",
}


def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ""


class AccountService:
    """Owns user CRUD and keeps the default address inside the owned set.

    A user's default address is always either ``None`` or one of the
    addresses in ``user.addresses``. The owned list is replaced wholesale on
    every change rather than mutated in place.
    """

    def __init__(
        self,
        addresses: AddressService,
        verification: VerificationService,
        users: UserRepository | None = None,
    ):
        self.addresses = addresses
        self.verification = verification
        self.users = users or UserRepository()

    # Registration and login

    def register(self, user_fields: Mapping, address_fields: Mapping | None) -> User:
        """Create a user with one address and send the first verification code.

        If sending the code fails the user and address stay persisted and the
        notifier error propagates to the caller.
        """

        email = _clean(user_fields.get("email"))
        first_name = _clean(user_fields.get("firstName"))
        last_name = _clean(user_fields.get("lastName"))
        password = user_fields.get("password")

        missing = [
            name
            for name, value in (
                ("email", email),
                ("password", password if isinstance(password, str) else ""),
                ("firstName", first_name),
                ("lastName", last_name),
            )
            if not value
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        if self.users.find_by_email(email) is not None:
            raise AlreadyExists("User already exists")

        address = self.addresses.create(address_fields)

        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            addresses=[address],
            default_address=address,
        )
        user.set_password(password)
        self.users.insert(user)
        logger.info("Registered user %s", user.id)

        self.verification.issue(user.id, user.email)
        return user

    def login(self, email, password) -> tuple[User, str]:
        """Check credentials and return the user with a bearer token.

        Unknown email and wrong password raise the same error.
        """

        email = _clean(email)
        user = self.users.find_by_email(email) if email else None
        if user is None or not isinstance(password, str) or not user.check_password(password):
            raise InvalidCredentials()

        token = create_access_token(identity=str(user.id))
        return user, token

    # Profile

    def get_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def update_user(self, user_id: int, fields: Mapping) -> User:
        """Apply a partial profile update.

        Addresses, verification and seller status have their own operations
        and are ignored here. Every field is checked before any is applied.
        """

        user = self.get_user(user_id)

        changes = {}
        for key, column in PROFILE_FIELDS.items():
            if key not in fields:
                continue
            value = _clean(fields[key])
            if not value:
                raise ValidationError(f"{key} must not be empty")
            if key == "email" and value != user.email:
                if self.users.find_by_email(value) is not None:
                    raise AlreadyExists("User already exists")
            changes[column] = value

        password = fields.get("password")
        if "password" in fields and (not isinstance(password, str) or not password):
            raise ValidationError("password must not be empty")

        for column, value in changes.items():
            setattr(user, column, value)
        if "password" in fields:
            user.set_password(password)

        return self.users.save(user)

    def update_seller_status(self, user_id: int, is_seller) -> User:
        if not isinstance(is_seller, bool):
            raise ValidationError("isSellerStatus must be a boolean value")
        user = self.get_user(user_id)
        user.is_seller = is_seller
        return self.users.save(user)

    def delete_user(self, user_id: int) -> None:
        """Delete the user, every owned address and any pending codes.

        Addresses are removed one by one; there is no enclosing transaction.
        """

        user = self.get_user(user_id)
        owned_ids = [address.id for address in user.addresses]

        user.addresses = []
        user.default_address = None
        self.users.save(user)

        for address_id in owned_ids:
            self.addresses.delete(address_id)

        self.verification.discard(user.id)
        self.users.delete(user)
        logger.info("Deleted user %s and %d address(es)", user_id, len(owned_ids))

    # Addresses

    def _owned_address(self, user: User, address_id: int) -> Address:
        for address in user.addresses:
            if address.id == address_id:
                return address
        raise NotFound("Address not found for this user")

    def add_address(self, user_id: int, fields: Mapping) -> User:
        user = self.get_user(user_id)
        address = self.addresses.create(fields)

        was_empty = not user.addresses
        user.addresses = [*user.addresses, address]
        if was_empty:
            user.default_address = address
        return self.users.save(user)

    def update_address(self, user_id: int, address_id: int, fields: Mapping) -> User:
        user = self.get_user(user_id)
        self._owned_address(user, address_id)
        self.addresses.update(address_id, fields)
        return user

    def set_default_address(self, user_id: int, address_id: int) -> User:
        user = self.get_user(user_id)
        user.default_address = self._owned_address(user, address_id)
        return self.users.save(user)

    def remove_address(self, user_id: int, address_id: int) -> User:
        """Detach an address, fix up the default, then delete the record.

        The user is saved before the address row is deleted so a failed
        delete never leaves the default pointing at a missing address.
        """

        user = self.get_user(user_id)
        self._owned_address(user, address_id)

        remaining = [address for address in user.addresses if address.id != address_id]
        was_default = user.default_address_id == address_id
        user.addresses = remaining
        if was_default:
            user.default_address = remaining[0] if remaining else None
        self.users.save(user)

        self.addresses.delete(address_id)
        return user
