"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from flask import Request

from services.errors import ValidationError


def parse_json_request(req: Request) -> dict:
    """Return the parsed JSON object body or raise ``ValidationError``."""

    if not req.is_json:
        raise ValidationError("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise ValidationError("Request JSON body is required.")

    if not isinstance(data, dict):
        raise ValidationError("Request JSON payload must be an object.")

    if not data:
        raise ValidationError("Request JSON body must not be empty.")

    return data


def text_field(payload: dict, key: str) -> str | None:
    """Return ``payload[key]`` as a string; numbers are stringified, other types dropped."""

    value = payload.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    return value if isinstance(value, str) else None
