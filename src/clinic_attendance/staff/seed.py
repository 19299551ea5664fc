"""Demo staff and clinics loaded at startup."""

from __future__ import annotations

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .model import Clinic, StaffMember

DEMO_PASSWORD = "password123"

HALIFAX_CLINIC = Clinic(
    id="CLINIC001",
    name="Atlantic Health Clinic - Halifax",
    latitude=44.6488,
    longitude=-63.5752,
    radius=75,
)

DARTMOUTH_CLINIC = Clinic(
    id="CLINIC002",
    name="Atlantic Health Clinic - Dartmouth",
    latitude=44.6713,
    longitude=-63.5772,
    radius=100,
)

_SEED = [
    ("STAFF001", "Sarah Johnson", Role.NURSE, HALIFAX_CLINIC),
    ("STAFF002", "Michael Chen", Role.DOCTOR, HALIFAX_CLINIC),
    ("STAFF003", "Emily Roberts", Role.NURSE, DARTMOUTH_CLINIC),
    ("ADMIN001", "Clinic Administrator", Role.ADMIN, DARTMOUTH_CLINIC),
]


def build_demo_staff(password: str = DEMO_PASSWORD) -> list[StaffMember]:
    return [
        StaffMember(
            staff_id=staff_id,
            password_hash=generate_password_hash(password),
            name=name,
            role=role,
            assigned_clinic=clinic,
        )
        for staff_id, name, role, clinic in _SEED
    ]
