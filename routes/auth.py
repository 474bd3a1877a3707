"""Authentication blueprint: signup, email verification, login, logout and password reset."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from models.user import serialize_user
from services.auth_service import AuthService
from utils.request_validation import parse_json_request, text_field

auth_bp = Blueprint("auth", __name__)


def _service() -> AuthService:
    return current_app.extensions["auth_service"]


def _success(message: str, status: int = HTTPStatus.OK, user=None):
    body = {"success": True, "message": message}
    if user is not None:
        body["user"] = serialize_user(user)
    response = jsonify(body)
    response.status_code = status
    return response


@auth_bp.route("/signup", methods=["POST"])
def signup():
    """Register a new account and start its session."""
    payload = parse_json_request(request)
    service = _service()
    result = service.signup(
        text_field(payload, "name"),
        text_field(payload, "email"),
        text_field(payload, "password"),
    )

    response = _success("User registered successfully", HTTPStatus.CREATED, result.user)
    service.sessions.attach(response, result.session_token)
    return response


@auth_bp.route("/verify-email", methods=["POST"])
def verify_email():
    """Confirm an email address with the six digit code."""
    payload = parse_json_request(request)
    user = _service().verify_email(text_field(payload, "code"))
    return _success("Email verified successfully", user=user)


@auth_bp.route("/login", methods=["POST"])
def login():
    """Authenticate with email and password and set the session cookie."""
    payload = parse_json_request(request)
    service = _service()
    result = service.login(text_field(payload, "email"), text_field(payload, "password"))

    response = _success("Logged in successfully", user=result.user)
    service.sessions.attach(response, result.session_token)
    return response


@auth_bp.route("/logout", methods=["POST"])
def logout():
    """Tell the client to discard its session cookie."""
    response = _success("Logged out successfully")
    _service().sessions.clear(response)
    return response


@auth_bp.route("/forgot-password", methods=["POST"])
def forgot_password():
    """Mail a time-limited password reset link."""
    payload = parse_json_request(request)
    _service().forgot_password(text_field(payload, "email"))
    return _success("Password reset link sent to your email")


@auth_bp.route("/reset-password/<token>", methods=["POST"])
def reset_password(token: str):
    """Set a new password using the token from the reset link."""
    payload = parse_json_request(request)
    _service().reset_password(token, text_field(payload, "password"))
    return _success("Password reset successful")


@auth_bp.route("/check-auth", methods=["GET"])
@jwt_required()
def check_auth():
    """Return the account bound to the current session cookie."""
    user = _service().current_user(get_jwt_identity())
    return jsonify({"success": True, "user": serialize_user(user)})
