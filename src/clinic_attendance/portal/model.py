from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AuthProvider, PortalRole


@dataclass(frozen=True)
class PortalUser:
    """Domain entity: an Atlantic Connect user signed in through a social provider.

    role stays None until onboarding completes.
    """

    user_id: str
    name: str
    email: str
    provider: AuthProvider
    is_profile_complete: bool = False
    role: Optional[PortalRole] = None
    phone: Optional[str] = None
    facility_name: Optional[str] = None
    facility_address: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "provider": self.provider.value,
            "isProfileComplete": self.is_profile_complete,
            "role": self.role.value if self.role else None,
        }
        if self.role == PortalRole.STAFF:
            data["phone"] = self.phone
        elif self.role == PortalRole.CLINIC:
            data["facilityName"] = self.facility_name
            data["facilityAddress"] = self.facility_address
        return data
