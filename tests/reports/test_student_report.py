from __future__ import annotations

import asyncio
import io

import pandas as pd

from src.academic_records.academic_records.reports.service import ReportService


def test_report_rows_follow_seed_data(seeded_container):
    report = asyncio.run(seeded_container.report_service.build_student_report(grade_level="5"))

    by_id = {row["student_id"]: row for row in report.rows}
    assert sorted(by_id) == [1, 2, 3]
    assert by_id[1]["average"] == 91
    assert by_id[1]["letter"] == "A"
    assert by_id[1]["attendance_rate"] == 100
    assert (by_id[2]["present"], by_id[2]["absent"], by_id[2]["late"]) == (0, 1, 1)
    assert report.summary["student_count"] == 3
    assert sum(report.summary["grade_distribution"].values()) == 8


def test_csv_export_has_percent_columns(seeded_container):
    svc: ReportService = seeded_container.report_service
    report = asyncio.run(svc.build_student_report(grade_level="5"))

    lines = svc.export_csv(report).splitlines()

    assert lines[0] == "Name,Grade,Average,Attendance"
    assert "Emma Johnson,5,91%,100%" in lines


def test_xlsx_export_round_trips_through_pandas(seeded_container):
    svc: ReportService = seeded_container.report_service
    report = asyncio.run(svc.build_student_report())

    df = pd.read_excel(io.BytesIO(svc.export_xlsx(report)), sheet_name="Students")

    assert len(df) == 8
    assert list(df.columns)[:3] == ["ID", "Name", "Grade"]


def test_dashboard_summary_from_seed(seeded_container, fixed_today):
    summary = asyncio.run(seeded_container.dashboard_service.summary(today=fixed_today))

    assert summary.total_students == 8
    assert summary.active_students == 7
    assert summary.average_attendance == 63
    assert summary.today_present_count == 0
