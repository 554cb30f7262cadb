from dataclasses import dataclass, field
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid
from pathlib import Path
from typing import Any, Protocol

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .utc import utcnow
from ..logger import get_logger
from ..schemas.contact import SanitizedContactData
from ..settings import Settings


logger = get_logger(__name__)


env = Environment(
    loader=FileSystemLoader(Path(__file__).parent.parent / "templates"), autoescape=select_autoescape(["html"])
)


class MailTransportError(Exception):
    pass


@dataclass(frozen=True)
class OutgoingMail:
    sender: str
    recipient: str
    subject: str
    html: str
    text: str
    reply_to: str | None = None


class MailTransport(Protocol):
    async def send(self, mail: OutgoingMail) -> str:
        """Deliver the mail and return its message id. Raises `MailTransportError` on failure."""


@dataclass
class SmtpTransport:
    hostname: str
    port: int
    username: str
    password: str
    use_tls: bool = False
    start_tls: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpTransport":
        return cls(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_password,
            use_tls=settings.smtp_tls,
            start_tls=settings.smtp_starttls,
        )

    async def send(self, mail: OutgoingMail) -> str:
        message_id = make_msgid(domain=mail.sender.rpartition("@")[2] or None)

        message = MIMEMultipart("alternative")
        message["From"] = mail.sender
        message["To"] = mail.recipient
        message["Subject"] = mail.subject
        message["Message-ID"] = message_id
        if mail.reply_to:
            message["Reply-To"] = mail.reply_to
        message.attach(MIMEText(mail.text, "plain"))
        message.attach(MIMEText(mail.html, "html"))

        try:
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls,
                start_tls=self.start_tls,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            raise MailTransportError(f"Could not deliver mail via {self.hostname}:{self.port}: {e}") from e

        return message_id


@dataclass
class MemoryTransport:
    """Keeps every mail in `outbox` instead of delivering it."""

    outbox: list[OutgoingMail] = field(default_factory=list)

    async def send(self, mail: OutgoingMail) -> str:
        self.outbox.append(mail)
        logger.info(f"Stored mail to {mail.recipient} in memory ({mail.subject})")
        return f"<memory-{len(self.outbox)}@portfolio-backend>"


@dataclass
class MailTemplate:
    subject: str
    html_template: str
    text_template: str

    def render(self, sender: str, recipient: str, *, reply_to: str | None = None, **kwargs: Any) -> OutgoingMail:
        return OutgoingMail(
            sender=sender,
            recipient=recipient,
            subject=self.subject.format(**kwargs),
            html=env.get_template(self.html_template).render(**kwargs),
            text=env.get_template(self.text_template).render(**kwargs),
            reply_to=reply_to,
        )


CONTACT_FORM = MailTemplate(
    subject="Portfolio Contact Form - Message from {first_name} {last_name}",
    html_template="contact_message.html",
    text_template="contact_message.txt",
)


class ContactMailer:
    def __init__(self, transport: MailTransport, sender: str, recipient: str) -> None:
        self.transport = transport
        self.sender = sender
        self.recipient = recipient

    async def send(self, data: SanitizedContactData) -> str:
        # the fields are escaped already and must not be escaped a second time by the html template
        mail = CONTACT_FORM.render(
            self.sender,
            self.recipient,
            reply_to=data.email,
            first_name=Markup(data.first_name),
            last_name=Markup(data.last_name),
            email=data.email,
            message=Markup(data.message),
            sent_at=utcnow(),
        )

        logger.debug(f"Sending contact message from {data.email} to {self.recipient}")
        message_id = await self.transport.send(mail)
        logger.info(f"Contact message sent ({message_id})")
        return message_id
