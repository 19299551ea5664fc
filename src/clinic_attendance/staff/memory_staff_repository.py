from __future__ import annotations

from typing import Iterable, Optional

from .model import StaffMember
from .repository import StaffRepository


class InMemoryStaffRepository(StaffRepository):
    """Read-only staff store built once at startup."""

    def __init__(self, members: Iterable[StaffMember] = ()):
        self._by_id: dict[str, StaffMember] = {}
        for member in members:
            if member.staff_id in self._by_id:
                raise ValueError(f"duplicate staffId {member.staff_id!r}")
            self._by_id[member.staff_id] = member

    def find_staff(self, staff_id: str) -> Optional[StaffMember]:
        return self._by_id.get(staff_id)
