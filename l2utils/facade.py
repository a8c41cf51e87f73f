"""A single entry point for sending mail that hides SMTP setup, login and formatting."""

from __future__ import annotations

import smtplib
from dataclasses import dataclass, field

HOST = "smtp.gmail.com"
PORT = "587"


@dataclass(frozen=True)
class SMTPConfig:
    """Where the SMTP server lives."""

    host: str = HOST
    port: str = PORT

    def address(self) -> str:
        """Return the server address as ``host:port``."""
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class Message:
    """A mail message made of a subject line and a body."""

    subject: str
    body: str

    def content(self) -> bytes:
        """Return the wire form of the message: subject, newline, body."""
        return f"{self.subject}\n{self.body}".encode("utf-8")


@dataclass
class MailFacade:
    """Everything needed to send one message, behind a single ``send`` call."""

    sender: str
    recipient: str
    subject: str
    body: str
    key: str
    config: SMTPConfig = field(default_factory=SMTPConfig)

    def send(self) -> None:
        """Connect, authenticate and deliver the message.

        Raises ``smtplib.SMTPException`` or ``OSError`` when delivery fails.
        """
        message = Message(self.subject, self.body)
        with smtplib.SMTP(self.config.host, int(self.config.port)) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            smtp.login(self.sender, self.key)
            smtp.sendmail(self.sender, [self.recipient], message.content())


def run_facade() -> None:
    """Send a sample message and report a failure on standard output."""
    mail = MailFacade(
        sender="sender@example.com",
        recipient="recipient@example.com",
        subject="Тема",
        body="Письмо",
        key="placeholder",
    )
    try:
        mail.send()
    except (smtplib.SMTPException, OSError):
        print("Произошла ошибка при отправке сообщения")