from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles carried in staff tokens."""

    ADMIN = "admin"
    NURSE = "nurse"
    DOCTOR = "doctor"


class AttendanceAction(str, Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


class PortalRole(str, Enum):
    """Onboarding roles for Atlantic Connect users."""

    STAFF = "staff"
    CLINIC = "clinic"


class AuthProvider(str, Enum):
    GOOGLE = "google"
    FACEBOOK = "facebook"
