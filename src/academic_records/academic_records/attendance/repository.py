from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    async def get_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    async def get_by_id(self, attendance_id: int) -> AttendanceRecord:
        raise NotImplementedError

    async def create(self, payload: Mapping[str, Any]) -> AttendanceRecord:
        raise NotImplementedError

    async def update(self, attendance_id: int, payload: Mapping[str, Any]) -> AttendanceRecord:
        raise NotImplementedError

    async def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError

    async def get_by_student_id(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    async def get_by_date(self, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    async def find_for_student_and_day(self, student_id: int, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError
