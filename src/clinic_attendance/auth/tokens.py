from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Mapping

import jwt

from ..common.datetime_utils import ensure_utc, now_utc
from ..core.exceptions import AuthorizationError


class TokenService:
    """Stateless HS256 bearer tokens scoped to one audience.

    decode() only accepts tokens whose aud matches this service. There is no
    refresh and no revocation list: a token stays valid until its exp claim passes.
    """

    def __init__(self, secret: str, *, ttl_hours: float, audience: str, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("JWT secret must be configured")
        if not audience:
            raise ValueError("JWT audience must be configured")
        self._secret = secret
        self._ttl = timedelta(hours=ttl_hours)
        self._audience = audience
        self._algorithm = algorithm

    def issue(self, claims: Mapping[str, Any], *, now: datetime | None = None) -> str:
        issued_at = ensure_utc(now or now_utc())
        payload = dict(claims)
        payload["aud"] = self._audience
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self._ttl
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={"require": ["exp", "iat", "aud"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthorizationError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthorizationError("Invalid token")
