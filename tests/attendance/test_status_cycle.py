from datetime import date

import pytest

from src.academic_records.academic_records.attendance.cycle import is_editable, next_status
from src.academic_records.academic_records.core.enums import AttendanceStatus


@pytest.mark.parametrize(
    "current, expected",
    [
        (None, AttendanceStatus.PRESENT),
        (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT),
        (AttendanceStatus.ABSENT, AttendanceStatus.LATE),
        (AttendanceStatus.LATE, AttendanceStatus.PRESENT),
        ("late", AttendanceStatus.PRESENT),
    ],
)
def test_next_status(current, expected):
    assert next_status(current) == expected


def test_only_today_and_past_days_are_editable():
    today = date(2024, 10, 16)

    assert is_editable(date(2024, 10, 15), today)
    assert is_editable(today, today)
    assert not is_editable(date(2024, 10, 17), today)
