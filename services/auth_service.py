"""Account lifecycle: signup, email verification, login and password reset."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable

from flask import current_app

from config import AuthSettings
from mail import AbstractMailer
from models.user import User, utcnow
from storage import AccountStore

from .errors import (
    AccountNotFound,
    ConflictError,
    InvalidCredentials,
    InvalidOrExpiredToken,
    ValidationError,
)
from .passwords import PasswordHasher
from .session import SessionIssuer


def generate_verification_code() -> str:
    """Return a random six digit code in the range 100000-999999."""

    return str(100000 + secrets.randbelow(900000))


def generate_reset_token() -> str:
    """Return 160 bits of randomness as 40 hex characters."""

    return secrets.token_hex(20)


def normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return (raw_email or "").strip().lower()


@dataclass(frozen=True)
class AuthResult:
    """An authenticated account together with its freshly issued session token."""

    user: User
    session_token: str


class AuthService:
    """Apply account state transitions against the store.

    Pending verification codes and reset tokens live on the user row next to
    their expiry. A token is only accepted while its expiry is strictly in
    the future, and it is cleared as soon as it is consumed. Notification
    mail goes out after the state change has been committed; delivery
    failures are logged and leave the committed state untouched.
    """

    def __init__(
        self,
        store: AccountStore,
        mailer: AbstractMailer,
        hasher: PasswordHasher,
        sessions: SessionIssuer,
        settings: AuthSettings,
    ):
        self.store = store
        self.mailer = mailer
        self.hasher = hasher
        self.sessions = sessions
        self.settings = settings

    def signup(self, name: str | None, email: str | None, password: str | None) -> AuthResult:
        """Create an unverified account, start a session and mail the verification code."""

        name = (name or "").strip()
        email = normalize_email(email)
        if not name or not email or not password:
            raise ValidationError("All fields are required")

        if self.store.find_by_email(email) is not None:
            current_app.logger.info("Signup rejected for existing email %s", email)
            raise ConflictError("User already exists")

        user = User(name=name, email=email, password_hash=self.hasher.hash(password))
        now = utcnow()
        code = generate_verification_code()
        # Live codes must be unique so a code resolves to a single account.
        while self.store.find_by_verification_token(code, now) is not None:
            code = generate_verification_code()
        user.start_verification(code, now + self.settings.verification_token_ttl)
        self.store.insert(user)
        current_app.logger.info("Registered user %s", user.id)

        token = self.sessions.issue(user.id)
        self._dispatch(self.mailer.send_verification, user.email, user.verification_token)
        return AuthResult(user=user, session_token=token)

    def verify_email(self, code: str | None) -> User:
        """Consume a pending verification code and mark the account verified."""

        code = (code or "").strip()
        user = self.store.find_by_verification_token(code, utcnow()) if code else None
        if user is None:
            current_app.logger.warning("Rejected invalid or expired verification code")
            raise InvalidOrExpiredToken("Invalid or expired verification code")

        user.mark_verified()
        self.store.update(user)
        current_app.logger.info("Verified email for user %s", user.id)

        self._dispatch(self.mailer.send_welcome, user.email, user.name)
        return user

    def login(self, email: str | None, password: str | None) -> AuthResult:
        """Check credentials, start a session and record the login time."""

        email = normalize_email(email)
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.store.find_by_email(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            current_app.logger.warning("Failed login attempt for %s", email)
            raise InvalidCredentials("Invalid credentials")

        token = self.sessions.issue(user.id)
        user.last_login = utcnow()
        self.store.update(user)
        current_app.logger.info("User %s logged in", user.id)
        return AuthResult(user=user, session_token=token)

    def forgot_password(self, email: str | None) -> None:
        """Issue a one hour reset token and mail the reset link."""

        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required")

        user = self.store.find_by_email(email)
        if user is None:
            raise AccountNotFound("User not found")

        token = generate_reset_token()
        user.start_password_reset(token, utcnow() + self.settings.reset_token_ttl)
        self.store.update(user)
        current_app.logger.info("Password reset requested for user %s", user.id)

        self._dispatch(self.mailer.send_password_reset, user.email, self.reset_url(token))

    def reset_password(self, token: str | None, password: str | None) -> None:
        """Consume a reset token and replace the password hash."""

        if not password:
            raise ValidationError("Password is required")

        token = (token or "").strip()
        user = self.store.find_by_reset_token(token, utcnow()) if token else None
        if user is None:
            current_app.logger.warning("Rejected invalid or expired reset token")
            raise InvalidOrExpiredToken("Invalid or expired reset token")

        user.complete_password_reset(self.hasher.hash(password))
        self.store.update(user)
        current_app.logger.info("Password reset completed for user %s", user.id)

        self._dispatch(self.mailer.send_reset_confirmation, user.email)

    def current_user(self, identity: str | int | None) -> User:
        """Resolve a session identity to its account."""

        try:
            user_id = int(identity)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise AccountNotFound("User not found") from None

        user = self.store.get(user_id)
        if user is None:
            raise AccountNotFound("User not found")
        return user

    def reset_url(self, token: str) -> str:
        return f"{self.settings.client_url}/reset-password/{token}"

    def _dispatch(self, send: Callable[..., None], *args: str) -> None:
        try:
            send(*args)
        except Exception:
            current_app.logger.exception("Failed to send %s", send.__name__)
