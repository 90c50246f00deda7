"""User model definition."""

from datetime import datetime

from werkzeug.security import check_password_hash, generate_password_hash

from . import db


# Owned address set. An address belongs to at most one user.
user_addresses = db.Table(
    "user_addresses",
    db.Column(
        "user_id",
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "address_id",
        db.Integer,
        db.ForeignKey("addresses.id", ondelete="CASCADE"),
        primary_key=True,
        unique=True,
    ),
)


class User(db.Model):
    """Represents a registered account."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(120), nullable=False)
    last_name = db.Column(db.String(120), nullable=False)
    is_verified = db.Column(db.Boolean, nullable=False, default=False)
    is_seller = db.Column(db.Boolean, nullable=False, default=False)
    default_address_id = db.Column(
        db.Integer,
        db.ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    addresses = db.relationship(
        "Address",
        secondary=user_addresses,
        order_by="Address.id",
    )
    default_address = db.relationship("Address", foreign_keys=[default_address_id])

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def mark_verified(self) -> None:
        """Mark the user's email address as verified."""

        self.is_verified = True

    def owns_address(self, address_id: int) -> bool:
        return any(address.id == address_id for address in self.addresses)

    def to_dict(self) -> dict:
        """Serialize the user. The password hash is never included."""

        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "isVerified": self.is_verified,
            "isSeller": self.is_seller,
            "addresses": [address.to_dict() for address in self.addresses],
            "defaultAddress": (
                self.default_address.to_dict() if self.default_address else None
            ),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
