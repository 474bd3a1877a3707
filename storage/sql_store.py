"""Flask-SQLAlchemy account store."""

from __future__ import annotations

from datetime import datetime

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models.user import User
from services.errors import ConflictError, UnexpectedError

from .account_store import AccountStore


class SqlAccountStore(AccountStore):
    """Store accounts in the ``users`` table through the request-scoped session.

    Email uniqueness is enforced by the table's unique index, so a racing
    duplicate insert surfaces here as ``ConflictError`` even when the
    caller's existence check passed.
    """

    def __init__(self, database: SQLAlchemy):
        self.db = database

    def get(self, user_id: int) -> User | None:
        return self.db.session.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        return User.query.filter_by(email=email).first()

    def find_by_verification_token(self, code: str, valid_at: datetime) -> User | None:
        return User.query.filter(
            User.verification_token == code,
            User.verification_token_expires_at > valid_at,
        ).first()

    def find_by_reset_token(self, token: str, valid_at: datetime) -> User | None:
        return User.query.filter(
            User.reset_password_token == token,
            User.reset_password_expires_at > valid_at,
        ).first()

    def insert(self, user: User) -> User:
        self.db.session.add(user)
        try:
            self.db.session.commit()
        except IntegrityError as exc:
            self.db.session.rollback()
            current_app.logger.warning("Duplicate account insert rejected: %s", user.email)
            raise ConflictError() from exc
        except SQLAlchemyError as exc:
            self.db.session.rollback()
            current_app.logger.exception("Failed to insert account")
            raise UnexpectedError() from exc
        return user

    def update(self, user: User) -> User:
        self.db.session.add(user)
        try:
            self.db.session.commit()
        except SQLAlchemyError as exc:
            self.db.session.rollback()
            current_app.logger.exception("Failed to update account %s", user.id)
            raise UnexpectedError() from exc
        return user
