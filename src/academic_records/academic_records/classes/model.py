from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Section


@dataclass(frozen=True)
class ClassSection:
    """Domain entity: an organizational grouping of students.

    Occupancy is not stored; it is derived from the students whose grade
    level and section match.
    """

    id: int
    name: str = ""
    grade_level: Optional[int] = None
    section: Optional[Section] = None
    capacity: int = 0
    teacher_id: Optional[str] = None
