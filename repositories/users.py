"""User repository."""

from __future__ import annotations

from models.user import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    def find_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive lookup on the stored email."""

        return self._session.query(User).filter(User.email == email).first()
