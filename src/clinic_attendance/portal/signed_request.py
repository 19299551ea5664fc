"""Meta (Facebook) signed_request verification.

Format: ``<base64url HMAC-SHA256 signature>.<base64url JSON payload>``, where the
signature covers the encoded payload and is keyed with the app secret.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json

from ..core.exceptions import ValidationError

EXPECTED_ALGORITHM = "HMAC-SHA256"


def _b64url_decode(value: str) -> bytes:
    padded = value + "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def parse_signed_request(signed_request: str, secret: str) -> dict:
    if not secret:
        raise ValidationError("App secret is not configured")

    encoded_sig, sep, payload = (signed_request or "").partition(".")
    if not sep or not encoded_sig or not payload:
        raise ValidationError("Malformed signed_request")

    try:
        sig = _b64url_decode(encoded_sig)
        data = json.loads(_b64url_decode(payload))
    except (binascii.Error, UnicodeError, ValueError):
        raise ValidationError("Malformed signed_request")

    if not isinstance(data, dict):
        raise ValidationError("Malformed signed_request")

    if str(data.get("algorithm", "")).upper() != EXPECTED_ALGORITHM:
        raise ValidationError("Unknown algorithm. Expected HMAC-SHA256")

    expected = hmac.new(secret.encode("utf-8"), payload.encode("ascii"), hashlib.sha256).digest()
    if not hmac.compare_digest(sig, expected):
        raise ValidationError("Bad signed JSON signature")

    return data


def build_signed_request(data: dict, secret: str) -> str:
    """Produce a signed_request the way Meta does; used by tests and local tooling."""
    payload = base64.urlsafe_b64encode(json.dumps(data).encode("utf-8")).decode("ascii").rstrip("=")
    sig = hmac.new(secret.encode("utf-8"), payload.encode("ascii"), hashlib.sha256).digest()
    encoded_sig = base64.urlsafe_b64encode(sig).decode("ascii").rstrip("=")
    return f"{encoded_sig}.{payload}"
