from __future__ import annotations

import threading
from typing import Optional

from ..core.enums import AuthProvider
from .model import PortalUser
from .repository import PortalUserRepository


class InMemoryPortalUserRepository(PortalUserRepository):
    def __init__(self):
        self._users: dict[str, PortalUser] = {}
        self._lock = threading.Lock()

    def get_by_id(self, user_id: str) -> Optional[PortalUser]:
        with self._lock:
            return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[PortalUser]:
        wanted = email.strip().lower()
        with self._lock:
            for user in self._users.values():
                if user.email.lower() == wanted:
                    return user
        return None

    def save(self, user: PortalUser) -> None:
        with self._lock:
            self._users[user.user_id] = user

    def delete(self, user_id: str, *, provider: AuthProvider) -> bool:
        with self._lock:
            user = self._users.get(user_id)
            if not user or user.provider != provider:
                return False
            del self._users[user_id]
            return True
