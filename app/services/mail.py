import asyncio
import logging
import smtplib
from email.message import EmailMessage

from app.exceptions.custom import MailDeliveryError
from app.schemas.notifications import MailMessage

logger = logging.getLogger(__name__)


def build_email(message: MailMessage) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = message.subject
    msg["From"] = message.sender
    msg["To"] = message.to
    if message.reply_to:
        msg["Reply-To"] = message.reply_to
    msg.set_content("This message requires an HTML-capable mail client.")
    msg.add_alternative(message.html, subtype="html")
    return msg


class SmtpMailGateway:
    """Sends HTML mail through an SMTP relay using STARTTLS."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        timeout: float = 30.0,
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._username and self._password)

    async def send(self, message: MailMessage) -> None:
        if not self.configured:
            raise MailDeliveryError("Mail credentials are not configured")
        try:
            msg = build_email(message)
        except ValueError as exc:
            # header values with CR/LF are rejected by the email package
            raise MailDeliveryError(f"Invalid mail headers for {message.to!r}: {exc}") from exc
        try:
            await asyncio.to_thread(self._send, msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"Failed to send mail to {message.to}: {exc}") from exc
        logger.info("Mail %r sent to %s", message.subject, message.to)

    def _send(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            server.starttls()
            server.login(self._username, self._password)
            server.send_message(msg)
