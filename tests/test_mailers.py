"""Tests for the mail backends and templates."""

from __future__ import annotations

import logging
import ssl

import pytest

from mail import OutboxMailer, SmtpMailer


class _FakeSMTP:
    instances: list["_FakeSMTP"] = []

    def __init__(self, host, port, timeout=None, context=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.context = context
        self.tls_context = None
        self.started_tls = False
        self.logged_in = None
        self.sent = []
        _FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self, context=None):
        self.started_tls = True
        self.tls_context = context

    def login(self, username, password):
        self.logged_in = (username, password)

    def send_message(self, msg):
        self.sent.append(msg)


@pytest.fixture()
def fake_smtp(monkeypatch):
    _FakeSMTP.instances = []
    monkeypatch.setattr("mail.smtp_mailer.smtplib.SMTP", _FakeSMTP)
    monkeypatch.setattr("mail.smtp_mailer.smtplib.SMTP_SSL", _FakeSMTP)
    return _FakeSMTP


def test_outbox_records_rendered_messages(caplog):
    logger = logging.getLogger("test-outbox")
    mailer = OutboxMailer(logger=logger)

    with caplog.at_level(logging.INFO, logger="test-outbox"):
        mailer.send_verification("ann@x.com", "123456")
        mailer.send_welcome("ann@x.com", "Ann <script>")
        mailer.send_password_reset("bob@x.com", "https://client.example/reset-password/abc")
        mailer.send_reset_confirmation("bob@x.com")

    assert len(mailer.outbox) == 4
    verification, welcome = mailer.messages_to("ann@x.com")
    assert "123456" in verification.text
    assert "123456" in verification.html
    assert "Ann <script>" in welcome.text
    assert "&lt;script&gt;" in welcome.html
    reset, confirmation = mailer.messages_to("bob@x.com")
    assert "https://client.example/reset-password/abc" in reset.html
    assert confirmation.subject == "Password reset successful"
    assert "Queued Email Verification email to ann@x.com" in caplog.text

    mailer.clear()
    assert mailer.outbox == []


def test_smtp_mailer_uses_starttls_and_login(fake_smtp):
    mailer = SmtpMailer(
        "smtp.example",
        587,
        sender_email="hello@example.com",
        sender_name="Auth Service",
        username="user",
        password="pass",
        timeout=5,
    )

    mailer.send_verification("ann@x.com", "654321")

    (server,) = fake_smtp.instances
    assert (server.host, server.port, server.timeout) == ("smtp.example", 587, 5)
    assert server.started_tls is True
    assert server.tls_context is not None
    assert server.tls_context.verify_mode == ssl.CERT_REQUIRED
    assert server.tls_context.check_hostname is True
    assert server.logged_in == ("user", "pass")
    (msg,) = server.sent
    assert msg["To"] == "ann@x.com"
    assert msg["From"] == "Auth Service <hello@example.com>"
    assert msg["Subject"] == "Verify your email"
    assert msg["X-Category"] == "Email Verification"
    assert [part.get_content_type() for part in msg.get_payload()] == ["text/plain", "text/html"]


def test_smtp_mailer_ssl_without_credentials(fake_smtp):
    mailer = SmtpMailer("smtp.example", 465, sender_email="hello@example.com", use_ssl=True)

    mailer.send_reset_confirmation("ann@x.com")

    (server,) = fake_smtp.instances
    assert server.started_tls is False
    assert server.context is not None
    assert server.context.verify_mode == ssl.CERT_REQUIRED
    assert server.logged_in is None
    assert len(server.sent) == 1
