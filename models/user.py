"""User model definition."""

from datetime import UTC, datetime
from typing import Any

from . import db


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime, matching stored columns."""

    return datetime.now(UTC).replace(tzinfo=None)


PUBLIC_FIELDS = (
    "id",
    "name",
    "email",
    "is_verified",
    "last_login",
    "created_at",
    "updated_at",
)


class User(db.Model):
    """Represents a registered account and its pending tokens."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_verified = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
    )
    verification_token = db.Column(db.String(6), nullable=True, index=True)
    verification_token_expires_at = db.Column(db.DateTime, nullable=True)
    reset_password_token = db.Column(db.String(64), nullable=True, index=True)
    reset_password_expires_at = db.Column(db.DateTime, nullable=True)
    last_login = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def start_verification(self, code: str, expires_at: datetime) -> None:
        """Record a pending email verification code."""

        self.verification_token = code
        self.verification_token_expires_at = expires_at

    def mark_verified(self) -> None:
        """Mark the email as verified and consume the pending code."""

        self.is_verified = True
        self.verification_token = None
        self.verification_token_expires_at = None

    def start_password_reset(self, token: str, expires_at: datetime) -> None:
        """Record a pending reset token, replacing any earlier one."""

        self.reset_password_token = token
        self.reset_password_expires_at = expires_at

    def complete_password_reset(self, password_hash: str) -> None:
        """Store the new password hash and consume the reset token."""

        self.password_hash = password_hash
        self.reset_password_token = None
        self.reset_password_expires_at = None

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"


def _isoformat(value: Any) -> Any:
    return value.isoformat() if isinstance(value, datetime) else value


def serialize_user(user: User) -> dict[str, Any]:
    """Return the client-facing representation of a user.

    Only the whitelisted fields are copied; password hashes and pending
    tokens never leave the server.
    """

    return {field: _isoformat(getattr(user, field)) for field in PUBLIC_FIELDS}
