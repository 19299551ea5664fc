from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import AuthProvider
from .model import PortalUser


class PortalUserRepository(Protocol):
    def get_by_id(self, user_id: str) -> Optional[PortalUser]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[PortalUser]:
        raise NotImplementedError

    def save(self, user: PortalUser) -> None:
        """Insert or replace by user_id."""

        raise NotImplementedError

    def delete(self, user_id: str, *, provider: AuthProvider) -> bool:
        raise NotImplementedError
