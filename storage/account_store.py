"""Account persistence abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from models.user import User


class AccountStore(ABC):
    """Interface for account persistence backends."""

    @abstractmethod
    def get(self, user_id: int) -> User | None:
        """Return the account with the given identity, if any."""

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the account registered under ``email``, if any."""

    @abstractmethod
    def find_by_verification_token(self, code: str, valid_at: datetime) -> User | None:
        """Return the account holding ``code`` if it expires after ``valid_at``."""

    @abstractmethod
    def find_by_reset_token(self, token: str, valid_at: datetime) -> User | None:
        """Return the account holding reset ``token`` if it expires after ``valid_at``."""

    @abstractmethod
    def insert(self, user: User) -> User:
        """Persist a new account; raise ``ConflictError`` on a duplicate email."""

    @abstractmethod
    def update(self, user: User) -> User:
        """Persist changes to an existing account."""
