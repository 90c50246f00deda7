"""SMTP notifier implementation."""

from __future__ import annotations

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from .abstract_notifier import AbstractNotifier, NotificationError

logger = logging.getLogger(__name__)

SUBJECT = "Email Verification"

TEXT_TEMPLATE = (
    "Your verification code is: {code}. This code is valid for 1 hour."
)

HTML_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
    <h2 style="color: #333;">Email Verification</h2>
    <p>Thank you for creating an account with our service.</p>
    <p>Your verification code is:</p>
    <h1 style="background-color: #f5f5f5; padding: 10px; text-align: center; letter-spacing: 5px;">{code}</h1>
    <p>This code is valid for <strong>1 hour</strong>.</p>
    <p>If you didn't request this verification, please ignore this email.</p>
</div>
"""


class SmtpNotifier(AbstractNotifier):
    """Send verification codes through an SMTP relay."""

    def __init__(
        self,
        host: str | None,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        sender: str | None = None,
        use_tls: bool = True,
    ):
        if not host:
            raise ValueError("SMTP_HOST must be configured for the smtp notifier.")
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username or "no-reply@localhost"
        self.use_tls = use_tls

    def build_message(self, email: str, code: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = self.sender
        msg["To"] = email
        msg["Subject"] = SUBJECT
        msg.attach(MIMEText(TEXT_TEMPLATE.format(code=code), "plain"))
        msg.attach(MIMEText(HTML_TEMPLATE.format(code=code), "html"))
        return msg

    def send_verification_code(self, email: str, code: str) -> None:
        msg = self.build_message(email, code)
        try:
            with smtplib.SMTP(self.host, self.port) as server:
                if self.use_tls:
                    server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(msg, to_addrs=[email])
        except (smtplib.SMTPException, OSError) as error:
            logger.error("Failed to send verification email to %s: %s", email, error)
            raise NotificationError(f"Failed to send email: {error}") from error

        logger.info("Verification email sent to %s", email)
