from __future__ import annotations

from flask import request

from ..core.exceptions import ValidationError


def json_body() -> dict:
    """Parsed JSON object from the request, or ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def form_or_json_value(key: str):
    # Meta posts application/x-www-form-urlencoded; local tools tend to send JSON.
    if key in request.form:
        return request.form.get(key)
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data.get(key)
    return None
