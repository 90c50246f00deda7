"""Development notifier that writes codes to the application log."""

from __future__ import annotations

import logging

from .abstract_notifier import AbstractNotifier

logger = logging.getLogger(__name__)


class LogNotifier(AbstractNotifier):
    """Logs verification codes instead of emailing them."""

    def send_verification_code(self, email: str, code: str) -> None:
        logger.info("[VERIFICATION] Email: %s Code: %s", email, code)
