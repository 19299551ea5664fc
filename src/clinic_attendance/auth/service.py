from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..staff.model import StaffMember
from ..staff.repository import StaffRepository
from .tokens import TokenService


@dataclass(frozen=True)
class LoginResult:
    """What the login endpoint returns to the client."""

    token: str
    staff: StaffMember

    def to_dict(self) -> dict:
        return {"token": self.token, "staff": self.staff.to_public_dict()}


def staff_claims(staff: StaffMember) -> dict:
    return {"staffId": staff.staff_id, "name": staff.name, "role": staff.role.value}


class AuthService:
    """Use case: authenticate staff (login) and resolve token subjects."""

    def __init__(self, staff: StaffRepository, tokens: TokenService):
        self._staff = staff
        self._tokens = tokens

    def login(self, staff_id: Any, password: Any) -> LoginResult:
        staff_id = require_non_empty(staff_id, "staffId")
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")

        staff = self._staff.find_staff(staff_id)
        if not staff:
            raise AuthenticationError("Invalid staff ID or password")

        try:
            ok = check_password_hash(staff.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid staff ID or password")

        return LoginResult(token=self._tokens.issue(staff_claims(staff)), staff=staff)

    def current_staff(self, claims: dict) -> StaffMember:
        staff = self._staff.find_staff(str(claims.get("staffId", "")))
        if not staff:
            raise NotFoundError("Staff member not found")
        return staff
