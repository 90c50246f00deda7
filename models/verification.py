"""Email verification code model."""

from datetime import datetime, timedelta

from . import db


DEFAULT_CODE_TTL = timedelta(hours=1)


def _default_expiry() -> datetime:
    return datetime.utcnow() + DEFAULT_CODE_TTL


class Verification(db.Model):
    """A one-time code sent to a user's email address."""

    __tablename__ = "verifications"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    email = db.Column(db.String(255), nullable=False)
    code = db.Column(db.String(6), nullable=False)
    expires_at = db.Column(
        db.DateTime, nullable=False, default=_default_expiry, index=True
    )
    verified = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.utcnow()
        return self.expires_at <= now

    def __repr__(self) -> str:
        return (
            f"<Verification id={self.id} user_id={self.user_id} verified={self.verified}>"
        )

    def to_dict(self) -> dict:
        """Serialize the record metadata. The code itself is left out."""

        return {
            "id": self.id,
            "userId": self.user_id,
            "email": self.email,
            "expiresAt": self.expires_at.isoformat() if self.expires_at else None,
            "verified": self.verified,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
