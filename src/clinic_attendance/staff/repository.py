from __future__ import annotations

from typing import Optional, Protocol

from .model import StaffMember


class StaffRepository(Protocol):
    """Repository interface for staff members.

    Services depend on this interface, not on a concrete store.
    """

    def find_staff(self, staff_id: str) -> Optional[StaffMember]:
        raise NotImplementedError
