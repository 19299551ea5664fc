from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Mapping

from ..common.datetime_utils import ensure_utc, now_utc, to_millis
from ..common.geo import haversine_distance
from ..common.validators import require_non_empty, require_number
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_PAGE_LIMIT, DUPLICATE_WINDOW_MINUTES
from ..core.enums import AttendanceAction
from ..core.exceptions import (
    AuthorizationError,
    DuplicateError,
    GeofenceError,
    NotFoundError,
    ValidationError,
)
from ..staff.repository import StaffRepository
from .model import AttendancePage, AttendanceRecord, Location
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_action(value: Any) -> AttendanceAction:
    raw = require_non_empty(value, "action")
    try:
        return AttendanceAction(raw)
    except ValueError:
        raise ValidationError("action must be 'check-in' or 'check-out'")


def parse_location(value: Any) -> Location:
    if not isinstance(value, Mapping):
        raise ValidationError("location is required")

    latitude = require_number(value.get("latitude"), "location.latitude", minimum=-90, maximum=90)
    longitude = require_number(value.get("longitude"), "location.longitude", minimum=-180, maximum=180)

    accuracy = value.get("accuracy")
    if accuracy is not None:
        accuracy = require_number(accuracy, "location.accuracy", minimum=0)

    return Location(latitude=latitude, longitude=longitude, accuracy=accuracy)


class AttendanceService:
    """Use case: verify a staff member's position and record attendance."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        *,
        duplicate_window_minutes: int = DUPLICATE_WINDOW_MINUTES,
        enforce_staff_match: bool = False,
    ):
        self._attendance = attendance
        self._staff = staff
        self._duplicate_window = timedelta(minutes=int(duplicate_window_minutes))
        self._enforce_staff_match = bool(enforce_staff_match)

    def mark_attendance(
        self,
        staff_id: Any,
        action: Any,
        location: Any,
        clinic_id: Any = None,
        *,
        now: datetime | None = None,
        auth_staff_id: str | None = None,
    ) -> AttendanceRecord:
        staff_id = require_non_empty(staff_id, "staffId")
        action = parse_action(action)
        reported = parse_location(location)
        now = ensure_utc(now or now_utc())

        # Under enforcement a caller with no staff identity counts as a mismatch.
        if auth_staff_id != staff_id and (self._enforce_staff_match or auth_staff_id is not None):
            logger.warning("Token for %s used to mark attendance for %s", auth_staff_id, staff_id)
            if self._enforce_staff_match:
                raise AuthorizationError("You can only mark your own attendance")

        staff = self._staff.find_staff(staff_id)
        if not staff:
            raise NotFoundError("Staff member not found")

        clinic = staff.assigned_clinic
        if clinic_id is not None and str(clinic_id) != clinic.id:
            logger.warning(
                "Staff %s reported clinicId=%s but is assigned to %s; recording assigned clinic",
                staff_id,
                clinic_id,
                clinic.id,
            )

        distance = haversine_distance(reported.latitude, reported.longitude, clinic.latitude, clinic.longitude)
        if distance > clinic.radius:
            logger.info("Geofence rejected %s: %.2fm from %s (radius %sm)", staff_id, distance, clinic.id, clinic.radius)
            raise GeofenceError(
                f"You are {round(distance)}m away from {clinic.name}. "
                f"Please get within {clinic.radius:g}m to mark attendance.",
                distance=round(distance, 2),
                required=clinic.radius,
            )

        record = AttendanceRecord(
            id=to_millis(now),
            staff_id=staff.staff_id,
            staff_name=staff.name,
            action=action,
            location=reported,
            clinic_id=clinic.id,
            clinic_name=clinic.name,
            distance=round(distance, 2),
            timestamp=now,
            verified=True,
        )

        window_start = now - self._duplicate_window

        def _is_duplicate(existing: AttendanceRecord) -> bool:
            return (
                existing.staff_id == staff.staff_id
                and existing.action == action
                and existing.timestamp > window_start
            )

        stored = self._attendance.append_record(record, reject_if=_is_duplicate)
        if stored is None:
            minutes = int(self._duplicate_window.total_seconds() // 60)
            raise DuplicateError(f"You have already recorded {action.value} in the last {minutes} minutes")

        logger.info("Recorded %s for %s at %s (%.2fm)", action.value, staff.staff_id, clinic.id, stored.distance)
        return stored

    def get_history(self, staff_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        if limit < 1:
            raise ValidationError("limit must be a positive integer")
        return list(self._attendance.query_history(staff_id, limit))

    def get_all(self, *, page: int = 1, limit: int = DEFAULT_PAGE_LIMIT) -> AttendancePage:
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be positive integers")
        records, total = self._attendance.query_all(offset=(page - 1) * limit, limit=limit)
        return AttendancePage(records=list(records), page=page, limit=limit, total=total)
