"""Verification record repository."""

from __future__ import annotations

from datetime import datetime

from models.verification import Verification

from .base import BaseRepository


class VerificationRepository(BaseRepository[Verification]):
    model = Verification

    def find_active(self, user_id: int, code: str, now: datetime) -> Verification | None:
        """Return the unexpired record matching both user and code."""

        return (
            self._session.query(Verification)
            .filter(
                Verification.user_id == user_id,
                Verification.code == code,
                Verification.expires_at > now,
            )
            .first()
        )

    def delete_for_user(self, user_id: int) -> int:
        deleted = (
            self._session.query(Verification)
            .filter(Verification.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self._session.commit()
        return deleted

    def delete_expired(self, now: datetime) -> int:
        deleted = (
            self._session.query(Verification)
            .filter(Verification.expires_at <= now)
            .delete(synchronize_session=False)
        )
        self._session.commit()
        return deleted
