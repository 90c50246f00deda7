"""Email verification code lifecycle."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta

from models.user import User
from models.verification import DEFAULT_CODE_TTL, Verification
from notifications import AbstractNotifier
from repositories import UserRepository, VerificationRepository

from .errors import AlreadyVerified, InvalidOrExpired, NotFound

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999


def generate_code() -> str:
    """Return a uniformly random six digit code (100000-999999)."""

    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


class VerificationService:
    """Issues, consumes and re-issues email verification codes.

    Issuing a code for a user deletes every earlier record for that user, so
    only the most recent code can ever match. Expired records are filtered at
    lookup time; ``purge_expired`` removes them from storage.
    """

    def __init__(
        self,
        notifier: AbstractNotifier,
        ttl: timedelta = DEFAULT_CODE_TTL,
        users: UserRepository | None = None,
        verifications: VerificationRepository | None = None,
    ):
        self.notifier = notifier
        self.ttl = ttl
        self.users = users or UserRepository()
        self.verifications = verifications or VerificationRepository()

    def issue(self, user_id: int, email: str) -> dict:
        """Create a fresh code for ``user_id`` and send it to ``email``.

        Returns the record metadata. The code is only ever sent through the
        notifier.
        """

        code = generate_code()
        superseded = self.verifications.delete_for_user(user_id)
        if superseded:
            logger.debug("Superseded %d verification(s) for user %s", superseded, user_id)

        verification = self.verifications.insert(
            Verification(
                user_id=user_id,
                email=email,
                code=code,
                expires_at=datetime.utcnow() + self.ttl,
            )
        )

        self.notifier.send_verification_code(email, code)
        logger.info("Issued verification %s for user %s", verification.id, user_id)
        return verification.to_dict()

    def consume(self, user_id: int, code: str) -> User:
        """Match ``code`` against the user's live record and verify the user."""

        verification = self.verifications.find_active(
            user_id, str(code), datetime.utcnow()
        )
        if verification is None:
            raise InvalidOrExpired()

        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User not found")

        verification.verified = True
        user.mark_verified()
        self.users.save(user)
        logger.info("User %s verified their email", user_id)
        return user

    def resend(self, user_id: int) -> dict:
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User not found")
        if user.is_verified:
            raise AlreadyVerified()
        return self.issue(user.id, user.email)

    def discard(self, user_id: int) -> int:
        """Drop every record for ``user_id``, used when the account is deleted."""

        return self.verifications.delete_for_user(user_id)

    def purge_expired(self, now: datetime | None = None) -> int:
        """Delete expired records and return how many were removed."""

        removed = self.verifications.delete_expired(now or datetime.utcnow())
        logger.info("Purged %d expired verification(s)", removed)
        return removed
