"""Notifier abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotificationError(Exception):
    """Raised when a message could not be handed to the transport."""


class AbstractNotifier(ABC):
    """Interface for outbound message backends."""

    @abstractmethod
    def send_verification_code(self, email: str, code: str) -> None:
        """Deliver a verification code to the given address."""
