from __future__ import annotations

import asyncio
import calendar
import logging
import threading
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, Dict, Optional, Sequence, Tuple

from ..analytics.metrics import attendance_rate, records_for
from ..common.datetime_utils import to_day, today_local
from ..core.constants import DEFAULT_LOW_ATTENDANCE_THRESHOLD
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.model import Student
from .cycle import is_editable, next_status
from .model import AttendanceGrid, AttendanceRecord, GridRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

DayKey = Tuple[int, date]


class _KeyLock:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class AttendanceService:
    """Use case: mark attendance, one record per student per calendar day.

    Writes for the same (student, day) key are serialised, so overlapping
    coroutines cannot both observe "no record" and insert twice, whether they
    share an event loop or run on separate request threads.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        low_attendance_threshold: int = DEFAULT_LOW_ATTENDANCE_THRESHOLD,
    ):
        self._attendance = attendance
        self._low_threshold = int(low_attendance_threshold)
        self._locks: Dict[DayKey, _KeyLock] = {}
        self._locks_guard = threading.Lock()

    @asynccontextmanager
    async def _key_lock(self, key: DayKey) -> AsyncIterator[None]:
        # Flask runs each async view on its own loop in a worker thread, so the
        # key locks are thread locks, acquired off-loop.
        with self._locks_guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _KeyLock()
            entry.users += 1
        try:
            await asyncio.to_thread(entry.lock.acquire)
            try:
                yield
            finally:
                entry.lock.release()
        finally:
            with self._locks_guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]

    @staticmethod
    def _status(value) -> AttendanceStatus:
        try:
            return AttendanceStatus(value)
        except ValueError:
            raise ValidationError(f"Invalid attendance status: {value!r}") from None

    async def _upsert(self, student_id: int, day: date, status: AttendanceStatus, reason: str) -> AttendanceRecord:
        existing = await self._attendance.find_for_student_and_day(student_id, day)
        if existing:
            record = await self._attendance.update(existing.id, {"status": status, "reason": reason})
            logger.info("Attendance %s updated: student=%s day=%s status=%s", record.id, student_id, day, status.value)
            return record

        record = await self._attendance.create(
            {"student_id": student_id, "date": day, "status": status, "reason": reason}
        )
        logger.info("Attendance %s created: student=%s day=%s status=%s", record.id, student_id, day, status.value)
        return record

    async def reconcile(self, student_id: int, day, status, reason: str = "") -> AttendanceRecord:
        """Create-or-update the record for (student_id, day)."""

        key_day = to_day(day)
        status = self._status(status)
        async with self._key_lock((student_id, key_day)):
            return await self._upsert(student_id, key_day, status, reason or "")

    async def toggle(self, student_id: int, day, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        """Advance the day's mark one step through the status cycle.

        Future days are inert: the current record (or None) is returned unchanged.
        """

        key_day = to_day(day)
        today = today or today_local()
        async with self._key_lock((student_id, key_day)):
            existing = await self._attendance.find_for_student_and_day(student_id, key_day)
            if not is_editable(key_day, today):
                return existing

            current = existing.status if existing else None
            reason = existing.reason if existing else ""
            return await self._upsert(student_id, key_day, next_status(current), reason)

    async def list_all(self) -> Sequence[AttendanceRecord]:
        return await self._attendance.get_all()

    async def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return await self._attendance.get_by_student_id(student_id)

    async def list_for_day(self, day) -> Sequence[AttendanceRecord]:
        return await self._attendance.get_by_date(to_day(day))

    async def delete(self, attendance_id: int) -> bool:
        return await self._attendance.delete(attendance_id)

    async def monthly_grid(
        self,
        students: Sequence[Student],
        year: int,
        month: int,
        *,
        today: Optional[date] = None,
    ) -> AttendanceGrid:
        """Weekday grid for one month, with each student's overall rate."""

        today = today or today_local()
        _, last = calendar.monthrange(year, month)
        days = tuple(
            d for d in (date(year, month, n) for n in range(1, last + 1)) if d.weekday() < 5
        )

        records = await self._attendance.get_all()
        status_by_key = {(r.student_id, r.date): r.status for r in records}

        rows = []
        for s in students:
            rate = attendance_rate(records_for(s.id, records))
            rows.append(
                GridRow(
                    student_id=s.id,
                    name=s.name,
                    grade_level=s.grade_level,
                    cells=tuple(status_by_key.get((s.id, d)) for d in days),
                    rate=rate,
                    low_attendance=rate < self._low_threshold,
                )
            )

        return AttendanceGrid(
            days=days,
            editable=tuple(is_editable(d, today) for d in days),
            rows=tuple(rows),
        )
