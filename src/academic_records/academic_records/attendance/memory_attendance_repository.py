from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional

from ..common.datetime_utils import to_day
from ..common.fields import canonicalize
from ..core import constants
from ..database.memory_base import InMemoryRecordStore
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class InMemoryAttendanceRepository(InMemoryRecordStore[AttendanceRecord]):
    def __init__(
        self,
        records: Iterable[AttendanceRecord] = (),
        *,
        latency_scale: float = constants.DEFAULT_LATENCY_SCALE,
    ):
        super().__init__(AttendanceRecord, records, latency_scale=latency_scale)

    def load(self, payloads: Iterable[Mapping[str, Any]]) -> int:
        """Bulk-insert raw records, skipping any second row for a (student, day) already held."""

        seen = {(r.student_id, r.date) for r in self.snapshot()}
        kept = []
        for payload in payloads:
            fields = canonicalize(AttendanceRecord, payload)
            key = (fields.get("student_id"), fields.get("date"))
            if key in seen:
                logger.warning("Skipping duplicate attendance for student %s on %s", key[0], key[1])
                continue
            seen.add(key)
            kept.append(payload)
        return super().load(kept)

    async def get_by_student_id(self, student_id: int) -> List[AttendanceRecord]:
        return await self.filter(lambda r: r.student_id == student_id)

    async def get_by_date(self, day) -> List[AttendanceRecord]:
        key = to_day(day)
        return await self.filter(lambda r: r.date == key)

    async def find_for_student_and_day(self, student_id: int, day: date) -> Optional[AttendanceRecord]:
        key = to_day(day)
        matches = await self.filter(lambda r: r.student_id == student_id and r.date == key)
        return matches[0] if matches else None
