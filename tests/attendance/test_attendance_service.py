from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from clinic_attendance.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from clinic_attendance.attendance.service import AttendanceService
from clinic_attendance.core.constants import EARTH_RADIUS_M
from clinic_attendance.core.enums import AttendanceAction, Role
from clinic_attendance.core.exceptions import (
    AuthorizationError,
    DuplicateError,
    GeofenceError,
    NotFoundError,
    ValidationError,
)
from clinic_attendance.staff.memory_staff_repository import InMemoryStaffRepository
from clinic_attendance.staff.model import Clinic, StaffMember

CLINIC = Clinic(id="C1", name="Harbour Clinic", latitude=44.6488, longitude=-63.5752, radius=75)
OTHER_CLINIC = Clinic(id="C2", name="Hillside Clinic", latitude=44.6713, longitude=-63.5772, radius=100)


def _staff(staff_id: str, clinic: Clinic = CLINIC) -> StaffMember:
    return StaffMember(
        staff_id=staff_id,
        password_hash="unused",
        name=f"Name {staff_id}",
        role=Role.NURSE,
        assigned_clinic=clinic,
    )


@pytest.fixture
def repo():
    return InMemoryAttendanceRepository()


@pytest.fixture
def svc(repo):
    staff = InMemoryStaffRepository([_staff("S1"), _staff("S2"), _staff("S3", OTHER_CLINIC)])
    return AttendanceService(repo, staff)


def at(meters: float) -> dict:
    """A location `meters` due north of the clinic."""
    return {
        "latitude": CLINIC.latitude + math.degrees(meters / EARTH_RADIUS_M),
        "longitude": CLINIC.longitude,
        "accuracy": 8,
    }


def test_mark_inside_radius_succeeds(svc, repo, fixed_now):
    record = svc.mark_attendance("S1", "check-in", at(74), "C1", now=fixed_now)

    assert record.staff_id == "S1"
    assert record.staff_name == "Name S1"
    assert record.action == AttendanceAction.CHECK_IN
    assert record.distance == pytest.approx(74, abs=0.01)
    assert record.clinic_id == "C1"
    assert record.verified is True
    assert record.timestamp == fixed_now
    assert len(repo) == 1


def test_mark_outside_radius_reports_distance_and_required(svc, repo, fixed_now):
    with pytest.raises(GeofenceError) as exc:
        svc.mark_attendance("S1", "check-in", at(76), "C1", now=fixed_now)

    assert exc.value.required == 75
    assert exc.value.distance == pytest.approx(76, abs=0.01)
    assert exc.value.to_dict()["required"] == 75
    assert len(repo) == 0


@pytest.mark.parametrize(
    "staff_id, action, location",
    [
        (None, "check-in", {"latitude": 44.6488, "longitude": -63.5752}),
        ("", "check-in", {"latitude": 44.6488, "longitude": -63.5752}),
        ("S1", None, {"latitude": 44.6488, "longitude": -63.5752}),
        ("S1", "checkin", {"latitude": 44.6488, "longitude": -63.5752}),
        ("S1", "check-in", None),
        ("S1", "check-in", {"longitude": -63.5752}),
        ("S1", "check-in", {"latitude": "44.6", "longitude": -63.5752}),
        ("S1", "check-in", {"latitude": True, "longitude": -63.5752}),
        ("S1", "check-in", {"latitude": 91, "longitude": -63.5752}),
        ("S1", "check-in", {"latitude": float("nan"), "longitude": -63.5752}),
        ("S1", "check-in", {"latitude": 44.6488, "longitude": -63.5752, "accuracy": -1}),
    ],
)
def test_invalid_input_is_rejected(svc, repo, fixed_now, staff_id, action, location):
    with pytest.raises(ValidationError):
        svc.mark_attendance(staff_id, action, location, now=fixed_now)
    assert len(repo) == 0


def test_unknown_staff_is_not_found(svc, fixed_now):
    with pytest.raises(NotFoundError):
        svc.mark_attendance("NOPE", "check-in", at(0), now=fixed_now)


def test_second_checkin_within_window_is_duplicate(svc, fixed_now):
    svc.mark_attendance("S1", "check-in", at(10), now=fixed_now)

    with pytest.raises(DuplicateError):
        svc.mark_attendance("S1", "check-in", at(10), now=fixed_now + timedelta(minutes=4, seconds=59))


def test_checkin_allowed_again_after_window(svc, repo, fixed_now):
    svc.mark_attendance("S1", "check-in", at(10), now=fixed_now)
    svc.mark_attendance("S1", "check-in", at(10), now=fixed_now + timedelta(minutes=5))

    assert len(repo) == 2


def test_duplicate_is_per_staff_and_action(svc, repo, fixed_now):
    svc.mark_attendance("S1", "check-in", at(10), now=fixed_now)
    svc.mark_attendance("S1", "check-out", at(10), now=fixed_now + timedelta(seconds=30))
    svc.mark_attendance("S2", "check-in", at(10), now=fixed_now + timedelta(seconds=40))

    assert len(repo) == 3


def test_request_clinic_id_does_not_change_recorded_clinic(svc, fixed_now):
    record = svc.mark_attendance("S1", "check-in", at(5), "C2", now=fixed_now)

    assert record.clinic_id == "C1"
    assert record.clinic_name == "Harbour Clinic"


def test_geofence_uses_assigned_clinic(svc, fixed_now):
    # S3 is assigned to the other clinic, ~2.5 km away.
    with pytest.raises(GeofenceError) as exc:
        svc.mark_attendance("S3", "check-in", at(0), "C2", now=fixed_now)
    assert exc.value.required == 100


def test_token_staff_mismatch_allowed_by_default(svc, fixed_now):
    record = svc.mark_attendance("S2", "check-in", at(5), now=fixed_now, auth_staff_id="S1")
    assert record.staff_id == "S2"


def test_token_staff_mismatch_rejected_when_enforced(repo, fixed_now):
    svc = AttendanceService(repo, InMemoryStaffRepository([_staff("S1"), _staff("S2")]), enforce_staff_match=True)

    with pytest.raises(AuthorizationError):
        svc.mark_attendance("S2", "check-in", at(5), now=fixed_now, auth_staff_id="S1")
    assert len(repo) == 0


def test_missing_token_staff_rejected_when_enforced(repo, fixed_now):
    svc = AttendanceService(repo, InMemoryStaffRepository([_staff("S1")]), enforce_staff_match=True)

    with pytest.raises(AuthorizationError):
        svc.mark_attendance("S1", "check-in", at(5), now=fixed_now, auth_staff_id=None)
    assert len(repo) == 0


def test_matching_token_staff_accepted_when_enforced(repo, fixed_now):
    svc = AttendanceService(repo, InMemoryStaffRepository([_staff("S1")]), enforce_staff_match=True)

    record = svc.mark_attendance("S1", "check-in", at(5), now=fixed_now, auth_staff_id="S1")
    assert record.staff_id == "S1"


def test_concurrent_checkins_store_exactly_one(svc, repo, fixed_now):
    def attempt(_):
        try:
            svc.mark_attendance("S1", "check-in", at(5), now=fixed_now)
            return "ok"
        except DuplicateError:
            return "dup"

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(16)))

    assert results.count("ok") == 1
    assert results.count("dup") == 15
    assert len(repo) == 1


def test_history_is_newest_first_and_limited(svc, fixed_now):
    for i in range(6):
        action = "check-in" if i % 2 == 0 else "check-out"
        svc.mark_attendance("S1", action, at(5), now=fixed_now + timedelta(hours=i))
    svc.mark_attendance("S2", "check-in", at(5), now=fixed_now)

    records = svc.get_history("S1", limit=4)

    assert len(records) == 4
    assert all(r.staff_id == "S1" for r in records)
    timestamps = [r.timestamp for r in records]
    assert all(a > b for a, b in zip(timestamps, timestamps[1:]))
    assert timestamps[0] == fixed_now + timedelta(hours=5)


def test_history_default_limit_is_ten(svc, fixed_now):
    for i in range(12):
        svc.mark_attendance("S1", "check-in", at(5), now=fixed_now + timedelta(minutes=10 * i))

    assert len(svc.get_history("S1")) == 10


def test_history_rejects_non_positive_limit(svc):
    with pytest.raises(ValidationError):
        svc.get_history("S1", limit=0)


def test_get_all_paginates(svc, fixed_now):
    for i in range(5):
        svc.mark_attendance("S1", "check-in", at(5), now=fixed_now + timedelta(minutes=10 * i))

    page = svc.get_all(page=2, limit=2)

    assert page.total == 5
    assert page.total_pages == 3
    assert [r.timestamp for r in page.records] == [
        fixed_now + timedelta(minutes=20),
        fixed_now + timedelta(minutes=10),
    ]
    assert page.to_dict()["totalPages"] == 3
