from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository, RecordPredicate


def _newest_first(records: list[AttendanceRecord]) -> list[AttendanceRecord]:
    return sorted(records, key=lambda r: (r.timestamp, r.id), reverse=True)


class InMemoryAttendanceRepository(AttendanceRepository):
    """Process-local, append-only attendance history.

    Unbounded: nothing is ever evicted, and a restart loses everything.
    """

    def __init__(self):
        self._records: list[AttendanceRecord] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def append_record(
        self,
        record: AttendanceRecord,
        *,
        reject_if: Optional[RecordPredicate] = None,
    ) -> Optional[AttendanceRecord]:
        with self._lock:
            if reject_if is not None and any(reject_if(r) for r in self._records):
                return None

            # Ids come from millisecond timestamps; two writes in the same ms get bumped.
            if record.id <= self._last_id:
                record = replace(record, id=self._last_id + 1)
            self._last_id = record.id
            self._records.append(record)
            return record

    def query_history(self, staff_id: str, limit: int) -> Sequence[AttendanceRecord]:
        with self._lock:
            items = [r for r in self._records if r.staff_id == staff_id]
        return _newest_first(items)[:limit]

    def query_all(self, *, offset: int, limit: int) -> tuple[Sequence[AttendanceRecord], int]:
        with self._lock:
            items = list(self._records)
        ordered = _newest_first(items)
        return ordered[offset : offset + limit], len(ordered)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
