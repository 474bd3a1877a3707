"""Mail backends."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .abstract_mailer import AbstractMailer, MailMessage
from .outbox_mailer import OutboxMailer
from .smtp_mailer import SmtpMailer

__all__ = ["AbstractMailer", "MailMessage", "OutboxMailer", "SmtpMailer", "build_mailer"]


def build_mailer(config: Mapping[str, Any], logger: logging.Logger | None = None) -> AbstractMailer:
    """Create the mail backend named by ``MAIL_BACKEND``."""

    backend = (config.get("MAIL_BACKEND") or "outbox").strip().lower()
    if backend == "outbox":
        return OutboxMailer(logger=logger)
    if backend == "smtp":
        return SmtpMailer(
            config["MAIL_SERVER"],
            int(config["MAIL_PORT"]),
            sender_email=config["MAIL_SENDER_EMAIL"],
            sender_name=config.get("MAIL_SENDER_NAME") or "",
            username=config.get("MAIL_USERNAME"),
            password=config.get("MAIL_PASSWORD"),
            use_ssl=bool(config.get("MAIL_USE_SSL")),
            use_tls=bool(config.get("MAIL_USE_TLS", True)),
            timeout=float(config.get("MAIL_TIMEOUT", 10.0)),
        )
    raise ValueError(f"Unknown MAIL_BACKEND: {backend!r}")
