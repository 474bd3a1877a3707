"""SMTP mail backend."""

from __future__ import annotations

import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from .abstract_mailer import AbstractMailer, MailMessage


class SmtpMailer(AbstractMailer):
    """Send messages through an SMTP relay such as Mailtrap's sending host."""

    def __init__(
        self,
        host: str,
        port: int,
        *,
        sender_email: str,
        sender_name: str = "",
        username: str | None = None,
        password: str | None = None,
        use_ssl: bool = False,
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.sender_email = sender_email
        self.sender_name = sender_name
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.use_tls = use_tls
        self.timeout = timeout
        self.ssl_context = ssl.create_default_context()

    def build(self, message: MailMessage) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = formataddr((self.sender_name, self.sender_email))
        msg["To"] = message.to
        msg["Subject"] = message.subject
        msg["X-Category"] = message.category
        msg.attach(MIMEText(message.text, "plain", "utf-8"))
        msg.attach(MIMEText(message.html, "html", "utf-8"))
        return msg

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(
                self.host, self.port, timeout=self.timeout, context=self.ssl_context
            )
        server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        if self.use_tls:
            server.starttls(context=self.ssl_context)
        return server

    def send(self, message: MailMessage) -> None:
        with self._connect() as server:
            if self.username:
                server.login(self.username, self.password or "")
            server.send_message(self.build(message))
