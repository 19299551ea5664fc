import base64
import json

import pytest

from clinic_attendance.core.exceptions import ValidationError
from clinic_attendance.portal.signed_request import build_signed_request, parse_signed_request

SECRET = "app-secret"


def test_valid_signed_request_is_parsed():
    data = {"algorithm": "HMAC-SHA256", "user_id": "12345", "issued_at": 1700000000}

    assert parse_signed_request(build_signed_request(data, SECRET), SECRET) == data


def test_algorithm_is_case_insensitive():
    data = {"algorithm": "hmac-sha256", "user_id": "1"}

    assert parse_signed_request(build_signed_request(data, SECRET), SECRET)["user_id"] == "1"


def test_wrong_secret_fails_signature_check():
    signed = build_signed_request({"algorithm": "HMAC-SHA256", "user_id": "1"}, SECRET)

    with pytest.raises(ValidationError, match="signature"):
        parse_signed_request(signed, "other-secret")


def test_tampered_payload_fails_signature_check():
    signed = build_signed_request({"algorithm": "HMAC-SHA256", "user_id": "1"}, SECRET)
    sig, _ = signed.split(".")
    other = base64.urlsafe_b64encode(json.dumps({"algorithm": "HMAC-SHA256", "user_id": "2"}).encode()).decode().rstrip("=")

    with pytest.raises(ValidationError):
        parse_signed_request(f"{sig}.{other}", SECRET)


def test_unknown_algorithm_is_rejected():
    signed = build_signed_request({"algorithm": "HMAC-MD5", "user_id": "1"}, SECRET)

    with pytest.raises(ValidationError, match="algorithm"):
        parse_signed_request(signed, SECRET)


@pytest.mark.parametrize("value", ["", "no-dot", ".payload", "sig.", "abc.!!!notbase64json"])
def test_malformed_input_is_rejected(value):
    with pytest.raises(ValidationError):
        parse_signed_request(value, SECRET)
