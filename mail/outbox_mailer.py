"""In-memory mail backend for development and tests."""

from __future__ import annotations

import logging

from .abstract_mailer import AbstractMailer, MailMessage


class OutboxMailer(AbstractMailer):
    """Keep delivered messages in :attr:`outbox` instead of sending them."""

    def __init__(self, logger: logging.Logger | None = None):
        self.outbox: list[MailMessage] = []
        self.logger = logger

    def send(self, message: MailMessage) -> None:
        self.outbox.append(message)
        if self.logger is not None:
            self.logger.info("Queued %s email to %s", message.category, message.to)

    def messages_to(self, email: str) -> list[MailMessage]:
        return [message for message in self.outbox if message.to == email]

    def clear(self) -> None:
        self.outbox.clear()
