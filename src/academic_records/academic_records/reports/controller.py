from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, Response, jsonify, request, send_file

from ..common.datetime_utils import today_local
from ..common.fields import to_camel
from ..container import Container
from ..core.constants import FILTER_ALL


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _filename(ext: str) -> str:
        return f"student-report-{today_local().isoformat()}.{ext}"

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    async def dashboard():
        summary = await container.dashboard_service.summary()
        return jsonify({to_camel(k): v for k, v in asdict(summary).items()})

    @app.route("/api/reports/students", methods=["GET"], endpoint="reports_students")
    async def reports_students():
        report = await reports.build_student_report(grade_level=request.args.get("grade_level", FILTER_ALL))
        return jsonify({"rows": report.rows, "summary": report.summary})

    @app.route("/api/reports/students.csv", methods=["GET"], endpoint="reports_students_csv")
    async def reports_students_csv():
        report = await reports.build_student_report(grade_level=request.args.get("grade_level", FILTER_ALL))
        return Response(
            reports.export_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={_filename('csv')}"},
        )

    @app.route("/api/reports/students.xlsx", methods=["GET"], endpoint="reports_students_xlsx")
    async def reports_students_xlsx():
        report = await reports.build_student_report(grade_level=request.args.get("grade_level", FILTER_ALL))
        return send_file(
            io.BytesIO(reports.export_xlsx(report)),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=_filename("xlsx"),
        )
