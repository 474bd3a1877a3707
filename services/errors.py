"""Domain errors raised by the account service and translated at the HTTP boundary."""

from __future__ import annotations

from http import HTTPStatus


class AuthError(Exception):
    """Base class for failures reported to the client as ``{success: false}``."""

    status_code: int = HTTPStatus.BAD_REQUEST
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    default_message = "All fields are required"


class ConflictError(AuthError):
    default_message = "User already exists"


class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"


class InvalidOrExpiredToken(AuthError):
    default_message = "Invalid or expired token"


class AccountNotFound(AuthError):
    default_message = "User not found"


class UnexpectedError(AuthError):
    """Infrastructure failure; the message stays generic."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Server error"
