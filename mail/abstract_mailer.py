"""Mail delivery abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from html import escape

from . import templates


@dataclass(frozen=True)
class MailMessage:
    """A rendered e-mail ready for delivery."""

    to: str
    subject: str
    text: str
    html: str
    category: str


class AbstractMailer(ABC):
    """Interface for mail backends.

    The ``send_*`` helpers render the account notification templates;
    backends only implement :meth:`send`.
    """

    @abstractmethod
    def send(self, message: MailMessage) -> None:
        """Deliver a rendered message or raise on failure."""

    def send_verification(self, email: str, code: str) -> None:
        self.send(
            MailMessage(
                to=email,
                subject=templates.VERIFICATION_SUBJECT,
                text=templates.VERIFICATION_TEXT.format(code=code),
                html=templates.VERIFICATION_HTML.format(code=escape(code)),
                category="Email Verification",
            )
        )

    def send_welcome(self, email: str, name: str) -> None:
        self.send(
            MailMessage(
                to=email,
                subject=templates.WELCOME_SUBJECT,
                text=templates.WELCOME_TEXT.format(name=name),
                html=templates.WELCOME_HTML.format(name=escape(name)),
                category="Welcome Email",
            )
        )

    def send_password_reset(self, email: str, reset_url: str) -> None:
        self.send(
            MailMessage(
                to=email,
                subject=templates.PASSWORD_RESET_SUBJECT,
                text=templates.PASSWORD_RESET_TEXT.format(reset_url=reset_url),
                html=templates.PASSWORD_RESET_HTML.format(reset_url=escape(reset_url)),
                category="Password Reset",
            )
        )

    def send_reset_confirmation(self, email: str) -> None:
        self.send(
            MailMessage(
                to=email,
                subject=templates.RESET_SUCCESS_SUBJECT,
                text=templates.RESET_SUCCESS_TEXT,
                html=templates.RESET_SUCCESS_HTML,
                category="Password Reset",
            )
        )
