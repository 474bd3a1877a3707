"""Application configuration module."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = "change-me"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    APP_ENV = os.getenv("APP_ENV", "development")
    SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///app.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    _raw_origins = os.getenv("ORIGINS", "*")
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]

    # Account lifecycle
    CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:5173")
    VERIFICATION_TOKEN_TTL = timedelta(hours=24)
    RESET_TOKEN_TTL = timedelta(hours=1)
    SESSION_TTL = timedelta(days=7)
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    # Session cookie
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = "token"
    JWT_ACCESS_TOKEN_EXPIRES = SESSION_TTL
    JWT_SESSION_COOKIE = False
    JWT_COOKIE_SAMESITE = "Strict"
    JWT_COOKIE_SECURE = APP_ENV == "production"
    # SameSite=Strict already keeps the cookie off cross-site requests.
    JWT_COOKIE_CSRF_PROTECT = False

    # Mail
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", "outbox")
    MAIL_SERVER = os.getenv("MAIL_SERVER", "localhost")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USE_SSL = _env_bool("MAIL_USE_SSL")
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS", True)
    MAIL_USERNAME = os.getenv("MAIL_USERNAME")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD")
    MAIL_SENDER_EMAIL = os.getenv("MAIL_SENDER_EMAIL", "hello@demomailtrap.com")
    MAIL_SENDER_NAME = os.getenv("MAIL_SENDER_NAME", "Auth Service")
    MAIL_TIMEOUT = float(os.getenv("MAIL_TIMEOUT", "10"))


@dataclass(frozen=True)
class AuthSettings:
    """Settings consumed by the account service and the session issuer."""

    client_url: str
    verification_token_ttl: timedelta
    reset_token_ttl: timedelta
    session_ttl: timedelta
    password_hash_method: str

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "AuthSettings":
        return cls(
            client_url=str(config["CLIENT_URL"]).rstrip("/"),
            verification_token_ttl=config["VERIFICATION_TOKEN_TTL"],
            reset_token_ttl=config["RESET_TOKEN_TTL"],
            session_ttl=config["SESSION_TTL"],
            password_hash_method=config["PASSWORD_HASH_METHOD"],
        )
