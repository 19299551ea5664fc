from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Clinic:
    """Geofence: a point plus the accepted radius in meters."""

    id: str
    name: str
    latitude: float
    longitude: float
    radius: float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius,
        }


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: a staff member with the clinic they are assigned to.

    The clinic is held inline; it is not shared with other staff records.
    """

    staff_id: str
    password_hash: str
    name: str
    role: Role
    assigned_clinic: Clinic

    def to_public_dict(self) -> dict:
        # Never expose password_hash.
        return {
            "staffId": self.staff_id,
            "name": self.name,
            "role": self.role.value,
            "assignedClinic": self.assigned_clinic.to_dict(),
        }
