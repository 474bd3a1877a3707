"""Application factory."""

import json
import os
import uuid

from flask import Flask, jsonify, g, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import DEFAULT_SECRET_KEY, AuthSettings, Config
from mail import build_mailer
from models import db
from routes.auth import auth_bp
from services.auth_service import AuthService
from services.errors import AuthError
from services.passwords import PasswordHasher
from services.session import SessionIssuer
from storage import SqlAccountStore

migrate = Migrate()
jwt = JWTManager()


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    _check_secrets(app)

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # Account service
    settings = AuthSettings.from_mapping(app.config)
    app.extensions["auth_service"] = AuthService(
        store=SqlAccountStore(db),
        mailer=build_mailer(app.config, logger=app.logger),
        hasher=PasswordHasher(settings.password_hash_method),
        sessions=SessionIssuer(settings),
        settings=settings,
    )

    # Blueprints
    app.register_blueprint(auth_bp, url_prefix="/auth")

    # Health
    @app.route("/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    # Errors
    _register_error_handlers(app)
    _register_session_handlers()

    return app


def _check_secrets(app: Flask) -> None:
    """Refuse to sign production sessions with the placeholder secret."""
    if app.config.get("APP_ENV") != "production":
        return
    for key in ("SECRET_KEY", "JWT_SECRET_KEY"):
        if not app.config.get(key) or app.config[key] == DEFAULT_SECRET_KEY:
            raise RuntimeError(f"{key} must be set in production.")


def _failure(message: str, status_code: int):
    request_id = g.get("request_id") or str(uuid.uuid4())
    response = jsonify({"success": False, "message": message, "request_id": request_id})
    response.status_code = status_code
    response.headers.setdefault("X-Request-ID", request_id)
    return response


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(AuthError)
    def _handle_auth_error(error: AuthError):
        return _failure(error.message, int(error.status_code))

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        request_id = g.get("request_id") or str(uuid.uuid4())
        response = error.get_response()
        payload = {
            "success": False,
            "message": error.description or getattr(error, "name", "Error"),
            "request_id": request_id,
        }
        response.data = json.dumps(payload)
        response.content_type = "application/json"
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        app.logger.exception("Unhandled application error", exc_info=error)
        return _failure("Server error", 500)


def _register_session_handlers() -> None:
    """Answer missing or bad session cookies in the same JSON shape."""

    @jwt.unauthorized_loader
    def _missing_session(reason: str):
        return _failure("Unauthorized - no token provided", 401)

    @jwt.invalid_token_loader
    def _invalid_session(reason: str):
        return _failure("Unauthorized - invalid token", 401)

    @jwt.expired_token_loader
    def _expired_session(jwt_header, jwt_payload):
        return _failure("Unauthorized - session expired", 401)


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
