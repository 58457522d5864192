"""Contact-form email relay over SMTP.

``send`` blocks on the network; async callers run it in the threadpool.
"""

from __future__ import annotations

import html
import logging
import smtplib
import ssl
from email.message import EmailMessage

from aviary.core.config import Settings
from aviary.core.exceptions import AppException, EmailDeliveryError
from aviary.schemas.contact import ContactMessage

logger = logging.getLogger(__name__)


class ContactMailer:
    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        recipient: str,
        subject: str = "New Bird Inquiry",
        starttls: bool = True,
        timeout: int = 30,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.recipient = recipient
        self.subject = subject
        self.starttls = starttls
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContactMailer":
        if not settings.email_enabled:
            raise AppException(
                "Email relay is not available. Configure EMAIL_ADDRESS and EMAIL_PASSWORD to enable.",
                status_code=503,
                code="EMAIL_DISABLED",
            )
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            recipient=settings.contact_recipient,
            subject=settings.contact_subject,
            starttls=settings.smtp_starttls,
            timeout=settings.smtp_timeout,
        )

    def compose(self, message: ContactMessage) -> EmailMessage:
        e = html.escape
        body = (
            "<p>You have a new inquiry</p>\n"
            "<h3>Contact Details</h3>\n"
            f"<p><b>Name:</b> {e(message.name)}</p>\n"
            f"<p><b>Email:</b> {e(str(message.email))}</p>\n"
            f"<p><b>Phone:</b> {e(message.phone or '')}</p>\n"
            "<h3>Message</h3>\n"
            f"<p>{e(message.message)}</p>\n"
        )
        email = EmailMessage()
        email["From"] = self.username
        email["To"] = self.recipient
        email["Reply-To"] = str(message.email)
        email["Subject"] = self.subject
        email.set_content(
            f"Name: {message.name}\nEmail: {message.email}\n"
            f"Phone: {message.phone or ''}\n\n{message.message}\n"
        )
        email.add_alternative(body, subtype="html")
        return email

    def send(self, message: ContactMessage) -> None:
        email = self.compose(message)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.starttls:
                    smtp.starttls(context=ssl.create_default_context())
                smtp.login(self.username, self.password)
                smtp.send_message(email)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("Failed to relay contact email via %s:%s: %s", self.host, self.port, exc)
            raise EmailDeliveryError() from exc
        logger.info("Relayed contact inquiry from %s", message.email)
