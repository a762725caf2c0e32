from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.fields import to_dict
from ..common.http import int_arg, json_body, require, require_int
from ..container import Container
from ..core.enums import StudentStatus
from ..query.pipeline import StudentFilter


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    async def attendance_list():
        student_id = int_arg("student_id")
        day = request.args.get("date")
        if student_id is not None:
            records = await service.list_for_student(student_id)
            if day:
                records = [r for r in records if r.date and r.date.isoformat() == day[:10]]
        elif day:
            records = await service.list_for_day(day)
        else:
            records = await service.list_all()
        return jsonify([to_dict(r) for r in records])

    @app.route("/api/attendance", methods=["PUT"], endpoint="attendance_reconcile")
    async def attendance_reconcile():
        body = json_body()
        record = await service.reconcile(
            require_int(body, "studentId", "student_id"),
            require(body, "date"),
            require(body, "status"),
            body.get("reason") or "",
        )
        return jsonify(to_dict(record))

    @app.route("/api/attendance/toggle", methods=["POST"], endpoint="attendance_toggle")
    async def attendance_toggle():
        body = json_body()
        record = await service.toggle(require_int(body, "studentId", "student_id"), require(body, "date"))
        return jsonify(to_dict(record) if record else None)

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    async def attendance_delete(attendance_id: int):
        return jsonify({"deleted": await service.delete(attendance_id)})

    @app.route("/api/attendance/grid", methods=["GET"], endpoint="attendance_grid")
    async def attendance_grid():
        today = today_local()
        year = int_arg("year") or today.year
        month = int_arg("month") or today.month

        students = await container.student_service.list_students(flt=StudentFilter(status=StudentStatus.ACTIVE.value))
        grid = await service.monthly_grid(students, year, month, today=today)
        return jsonify(
            {
                "days": [d.isoformat() for d in grid.days],
                "editable": list(grid.editable),
                "rows": [
                    {
                        "studentId": row.student_id,
                        "name": row.name,
                        "gradeLevel": row.grade_level,
                        "cells": [c.value if c else None for c in row.cells],
                        "rate": row.rate,
                        "lowAttendance": row.low_attendance,
                    }
                    for row in grid.rows
                ],
            }
        )
