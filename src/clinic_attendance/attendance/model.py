from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..core.enums import AttendanceAction


@dataclass(frozen=True)
class Location:
    """A reported position in degrees; accuracy in meters when the device gives one."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude, "accuracy": self.accuracy}


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one verified check-in or check-out. Never mutated."""

    id: int
    staff_id: str
    staff_name: str
    action: AttendanceAction
    location: Location
    clinic_id: str
    clinic_name: str
    distance: float
    timestamp: datetime
    verified: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "staffId": self.staff_id,
            "staffName": self.staff_name,
            "action": self.action.value,
            "location": self.location.to_dict(),
            "clinicId": self.clinic_id,
            "clinicName": self.clinic_name,
            "distance": self.distance,
            "timestamp": to_iso(self.timestamp),
            "verified": self.verified,
        }


@dataclass(frozen=True)
class AttendancePage:
    """Read-model for the paginated all-records query."""

    records: list[AttendanceRecord]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.limit - 1) // self.limit

    def to_dict(self) -> dict:
        return {
            "records": [r.to_dict() for r in self.records],
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }
