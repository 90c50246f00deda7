"""Notification backends for outbound verification codes."""

from .abstract_notifier import AbstractNotifier, NotificationError
from .log_notifier import LogNotifier
from .smtp_notifier import SmtpNotifier

__all__ = [
    "AbstractNotifier",
    "LogNotifier",
    "NotificationError",
    "SmtpNotifier",
    "build_notifier",
]


def build_notifier(config) -> AbstractNotifier:
    """Return the notifier selected by ``NOTIFIER_BACKEND``."""

    backend = (config.get("NOTIFIER_BACKEND") or "log").strip().lower()
    if backend == "smtp":
        return SmtpNotifier(
            host=config.get("SMTP_HOST"),
            port=int(config.get("SMTP_PORT", 587)),
            username=config.get("SMTP_USER"),
            password=config.get("SMTP_PASSWORD"),
            sender=config.get("MAIL_SENDER"),
            use_tls=bool(config.get("SMTP_USE_TLS", True)),
        )
    if backend == "log":
        return LogNotifier()
    raise ValueError(f"Unknown notifier backend: {backend}")
