"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from mail import OutboxMailer  # noqa: E402
from models import db  # noqa: E402
from models.user import User  # noqa: E402
from services.auth_service import AuthService  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    APP_ENV = "testing"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    JWT_COOKIE_SECURE = False
    MAIL_BACKEND = "outbox"
    CLIENT_URL = "https://client.example"
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def config_class() -> type[Config]:
    """Return the base test configuration for building extra apps."""

    return _BaseTestConfig


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def service(app: Flask) -> AuthService:
    return app.extensions["auth_service"]


@pytest.fixture()
def outbox(service: AuthService) -> OutboxMailer:
    assert isinstance(service.mailer, OutboxMailer)
    return service.mailer


@pytest.fixture()
def create_user(app: Flask, service: AuthService):
    """Persist a user directly and return its id."""

    def _create(
        email: str = "ann@x.com",
        password: str = "pw123456",
        name: str = "Ann",
        *,
        verified: bool = False,
    ) -> int:
        with app.app_context():
            user = User(
                name=name,
                email=email,
                password_hash=service.hasher.hash(password),
                is_verified=verified,
            )
            db.session.add(user)
            db.session.commit()
            return user.id

    return _create
