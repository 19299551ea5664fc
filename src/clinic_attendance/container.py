from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .auth.tokens import TokenService
from .core import constants
from .portal.memory_user_repository import InMemoryPortalUserRepository
from .portal.service import ProfileService
from .staff.memory_staff_repository import InMemoryStaffRepository
from .staff.seed import build_demo_staff


@dataclass(frozen=True)
class Container:
    staff_repo: InMemoryStaffRepository
    attendance_repo: InMemoryAttendanceRepository
    portal_users_repo: InMemoryPortalUserRepository

    staff_tokens: TokenService
    portal_tokens: TokenService

    auth_service: AuthService
    attendance_service: AttendanceService
    profile_service: ProfileService


def build_container(settings: Mapping[str, Any], *, staff_repo: InMemoryStaffRepository | None = None) -> Container:
    if staff_repo is None:
        members = build_demo_staff() if settings.get("SEED_DEMO_DATA", True) else []
        staff_repo = InMemoryStaffRepository(members)

    attendance_repo = InMemoryAttendanceRepository()
    portal_users_repo = InMemoryPortalUserRepository()

    jwt_secret = str(settings.get("JWT_SECRET") or "")
    staff_tokens = TokenService(
        jwt_secret,
        ttl_hours=float(settings.get("STAFF_TOKEN_HOURS", constants.STAFF_TOKEN_HOURS)),
        audience=constants.STAFF_TOKEN_AUDIENCE,
    )
    portal_tokens = TokenService(
        jwt_secret,
        ttl_hours=float(settings.get("PORTAL_TOKEN_HOURS", constants.PORTAL_TOKEN_HOURS)),
        audience=constants.PORTAL_TOKEN_AUDIENCE,
    )

    auth_service = AuthService(staff_repo, staff_tokens)
    attendance_service = AttendanceService(
        attendance_repo,
        staff_repo,
        duplicate_window_minutes=int(settings.get("DUPLICATE_WINDOW_MINUTES", constants.DUPLICATE_WINDOW_MINUTES)),
        enforce_staff_match=bool(settings.get("ENFORCE_STAFF_MATCH", False)),
    )
    profile_service = ProfileService(portal_users_repo, portal_tokens)

    return Container(
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        portal_users_repo=portal_users_repo,
        staff_tokens=staff_tokens,
        portal_tokens=portal_tokens,
        auth_service=auth_service,
        attendance_service=attendance_service,
        profile_service=profile_service,
    )
