from __future__ import annotations

from functools import wraps

from flask import g, request

from ..core.exceptions import AuthenticationError, AuthorizationError
from .tokens import TokenService


def bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def token_required(tokens: TokenService, *, subject_claim: str):
    """Require a valid bearer token; decoded claims go to g.token_claims.

    Missing token -> AuthenticationError (401). Bad token, or one without
    the subject claim -> AuthorizationError (403).
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token()
            if token is None:
                raise AuthenticationError("Access token required")
            claims = tokens.decode(token)
            if not claims.get(subject_claim):
                raise AuthorizationError("Invalid token")
            g.token_claims = claims
            return view(*args, **kwargs)

        return wrapper

    return decorator
