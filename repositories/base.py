"""Base repository over the Flask-SQLAlchemy session."""

from __future__ import annotations

from typing import Generic, TypeVar

from models import db

T = TypeVar("T", bound=db.Model)


class BaseRepository(Generic[T]):
    """Common insert/get/save/delete for a single model class.

    Every write commits immediately. Operations spanning several entities
    are sequences of independent commits, not transactions.
    """

    model: type[T]

    def __init__(self, session=None):
        self._session = session or db.session

    def get(self, entity_id: int) -> T | None:
        return self._session.get(self.model, entity_id)

    def insert(self, instance: T) -> T:
        self._session.add(instance)
        self._session.commit()
        return instance

    def save(self, instance: T) -> T:
        """Flush pending changes made to an already persisted instance."""

        self._session.commit()
        return instance

    def delete(self, instance: T) -> None:
        self._session.delete(instance)
        self._session.commit()
