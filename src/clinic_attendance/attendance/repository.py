from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from .model import AttendanceRecord

RecordPredicate = Callable[[AttendanceRecord], bool]


class AttendanceRepository(Protocol):
    def append_record(
        self,
        record: AttendanceRecord,
        *,
        reject_if: Optional[RecordPredicate] = None,
    ) -> Optional[AttendanceRecord]:
        """Append unless an existing record matches reject_if.

        The predicate check and the append must happen in one critical section.
        Returns the stored record (its id may be adjusted to stay unique), or
        None when a conflicting record exists.
        """

        raise NotImplementedError

    def query_history(self, staff_id: str, limit: int) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError

    def query_all(self, *, offset: int, limit: int) -> tuple[Sequence[AttendanceRecord], int]:
        """Newest first; returns (page of records, total count)."""

        raise NotImplementedError
