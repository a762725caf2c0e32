from __future__ import annotations

import asyncio
import io
from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Optional

import pandas as pd

from ..analytics.metrics import (
    DashboardSummary,
    attendance_breakdown,
    attendance_rate,
    dashboard_summary,
    grade_average,
    grade_distribution,
    grades_for,
    letter_grade,
    records_for,
)
from ..attendance.repository import AttendanceRepository
from ..core.constants import FILTER_ALL
from ..core.enums import AttendanceStatus
from ..grades.repository import GradeRepository
from ..query.pipeline import StudentFilter, filter_students
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


class DashboardService:
    def __init__(self, students: StudentRepository, grades: GradeRepository, attendance: AttendanceRepository):
        self._students = students
        self._grades = grades
        self._attendance = attendance

    async def summary(self, *, today: Optional[date] = None) -> DashboardSummary:
        students, grades, attendance = await asyncio.gather(
            self._students.get_all(),
            self._grades.get_all(),
            self._attendance.get_all(),
        )
        return dashboard_summary(students, grades, attendance, today=today)


class ReportService:
    """Per-student academic report, plus tabular exports."""

    def __init__(self, students: StudentRepository, grades: GradeRepository, attendance: AttendanceRepository):
        self._students = students
        self._grades = grades
        self._attendance = attendance

    async def build_student_report(self, *, grade_level=FILTER_ALL) -> ReportData:
        students, grades, attendance = await asyncio.gather(
            self._students.get_all(),
            self._grades.get_all(),
            self._attendance.get_all(),
        )

        rows: list[dict] = []
        for s in filter_students(students, StudentFilter(grade_level=grade_level)):
            mine = records_for(s.id, attendance)
            counts = Counter(r.status for r in mine)
            graded = grades_for(s.id, grades)
            average = grade_average(graded)
            rows.append(
                {
                    "student_id": s.id,
                    "name": s.name,
                    "grade_level": s.grade_level,
                    "section": getattr(s.section, "value", s.section) or "",
                    "average": average,
                    "letter": letter_grade(average).value,
                    "grade_count": len(graded),
                    "attendance_rate": attendance_rate(mine),
                    "present": counts[AttendanceStatus.PRESENT],
                    "absent": counts[AttendanceStatus.ABSENT],
                    "late": counts[AttendanceStatus.LATE],
                }
            )

        # Distribution and breakdown cover the whole school, not the filtered rows.
        summary = {
            "student_count": len(rows),
            "grade_distribution": grade_distribution(students, grades),
            "attendance_breakdown": attendance_breakdown(attendance),
        }
        return ReportData(rows=rows, summary=summary)

    @staticmethod
    def _frame(report: ReportData) -> pd.DataFrame:
        columns = [
            "student_id", "name", "grade_level", "section", "average", "letter",
            "grade_count", "attendance_rate", "present", "absent", "late",
        ]
        return pd.DataFrame(report.rows, columns=columns)

    def export_csv(self, report: ReportData) -> str:
        df = self._frame(report)
        out = pd.DataFrame(
            {
                "Name": df["name"],
                "Grade": df["grade_level"],
                "Average": df["average"].astype(str) + "%",
                "Attendance": df["attendance_rate"].astype(str) + "%",
            }
        )
        return out.to_csv(index=False)

    def export_xlsx(self, report: ReportData) -> bytes:
        df = self._frame(report).rename(
            columns={
                "student_id": "ID",
                "name": "Name",
                "grade_level": "Grade",
                "section": "Section",
                "average": "Average %",
                "letter": "Letter",
                "grade_count": "Grades",
                "attendance_rate": "Attendance %",
                "present": "Present",
                "absent": "Absent",
                "late": "Late",
            }
        )
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Students")
        return out.getvalue()
