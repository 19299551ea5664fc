"""Atlantic Connect accounts.

The Google/Facebook OAuth redirect lives outside this service. Whatever
handles the provider callback calls `ProfileService.sign_in_with_provider`
with the verified profile and returns `ProfileService.issue_token` to the
client; until then `/api/profile` answers 404 for that user.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

from ..auth.tokens import TokenService
from ..common.datetime_utils import now_utc, to_millis
from ..common.validators import require_non_empty
from ..core.enums import AuthProvider, PortalRole
from ..core.exceptions import NotFoundError, ValidationError
from .model import PortalUser
from .repository import PortalUserRepository
from .signed_request import parse_signed_request

logger = logging.getLogger(__name__)


class ProfileService:
    """Use cases for Atlantic Connect: social sign-in, onboarding, Meta data deletion."""

    def __init__(self, users: PortalUserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def sign_in_with_provider(
        self,
        provider: AuthProvider,
        provider_user_id: str,
        name: str,
        email: Optional[str] = None,
    ) -> PortalUser:
        """Provider verify callback: reuse the account with this email or create one."""
        provider_user_id = require_non_empty(provider_user_id, "provider user id")

        if not email:
            if provider != AuthProvider.FACEBOOK:
                raise ValidationError("email is required")
            email = f"{provider_user_id}@facebook.com"

        existing = self._users.get_by_email(email)
        if existing:
            logger.info("Existing portal user %s signed in via %s", existing.user_id, provider.value)
            return existing

        user = PortalUser(
            user_id=provider_user_id,
            name=name or email,
            email=email,
            provider=provider,
        )
        self._users.save(user)
        logger.info("Created portal user %s via %s", user.user_id, provider.value)
        return user

    def issue_token(self, user: PortalUser) -> str:
        return self._tokens.issue({"id": user.user_id, "email": user.email})

    def get_profile(self, user_id: str) -> PortalUser:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def complete_profile(
        self,
        user_id: str,
        *,
        role: Any,
        phone: Optional[str] = None,
        facility_name: Optional[str] = None,
        facility_address: Optional[str] = None,
    ) -> PortalUser:
        user = self.get_profile(user_id)

        if not role:
            raise ValidationError("Role is required.")
        try:
            role = PortalRole(role)
        except ValueError:
            raise ValidationError("Role must be 'staff' or 'clinic'.")

        if role == PortalRole.STAFF:
            updated = replace(user, role=role, phone=phone)
        else:
            updated = replace(
                user,
                role=role,
                facility_name=facility_name,
                facility_address=facility_address,
            )
        updated = replace(updated, is_profile_complete=True)

        self._users.save(updated)
        logger.info("Portal user %s completed onboarding as %s", user_id, role.value)
        return updated

    def handle_data_deletion(
        self,
        signed_request: Any,
        *,
        app_secret: str,
        base_url: str,
        now: datetime | None = None,
    ) -> dict:
        if not signed_request:
            raise ValidationError("Invalid request: signed_request is required.")

        data = parse_signed_request(str(signed_request), app_secret)
        user_id = str(data.get("user_id") or "")
        if not user_id:
            raise ValidationError("signed_request carries no user_id")

        if self._users.delete(user_id, provider=AuthProvider.FACEBOOK):
            logger.info("Deleted data for facebook user %s", user_id)
        else:
            logger.info("Data deletion requested for unknown facebook user %s", user_id)

        code = f"deletion_{user_id}_{to_millis(now or now_utc())}"
        return {
            "url": f"{base_url.rstrip('/')}/meta/deletion-status/{code}",
            "confirmation_code": code,
        }

    def deletion_status(self, confirmation_code: str) -> dict:
        # Deletion is synchronous, so every code reports complete.
        logger.info("Deletion status checked for %s", confirmation_code)
        return {"status": "complete"}
