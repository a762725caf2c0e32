from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional

from ..core.enums import Section, StudentStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: an enrolled person.

    Note: Plain data object, no storage access.
    """

    id: int
    name: str = ""
    email: str = ""
    phone: str = ""
    grade_level: Optional[int] = None
    section: Optional[Section] = None
    enrollment_date: Optional[datetime.date] = None
    status: StudentStatus = StudentStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE
