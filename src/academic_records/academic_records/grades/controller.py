from __future__ import annotations

from flask import Flask, jsonify, request

from ..analytics.metrics import grade_percentage
from ..common.fields import to_dict
from ..common.http import int_arg, json_body
from ..core.constants import FILTER_ALL
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.grade_service

    def _grade(g) -> dict:
        return {**to_dict(g), "percentage": grade_percentage(g)}

    @app.route("/api/grades", methods=["GET"], endpoint="grades_list")
    async def grades_list():
        grades = await service.list_grades(student_id=int_arg("student_id"), subject=request.args.get("subject"))
        return jsonify([_grade(g) for g in grades])

    @app.route("/api/grades", methods=["POST"], endpoint="grades_create")
    async def grades_create():
        return jsonify(_grade(await service.create(json_body()))), 201

    @app.route("/api/grades/table", methods=["GET"], endpoint="grades_table")
    async def grades_table():
        rows = await service.table(subject=request.args.get("subject", FILTER_ALL))
        return jsonify(
            [
                {
                    "student": to_dict(r.student),
                    "grades": [_grade(g) for g in r.grades],
                    "average": r.average,
                    "letter": r.letter.value,
                    "band": r.band,
                }
                for r in rows
            ]
        )

    @app.route("/api/grades/<int:grade_id>", methods=["GET"], endpoint="grades_get")
    async def grades_get(grade_id: int):
        return jsonify(_grade(await service.get(grade_id)))

    @app.route("/api/grades/<int:grade_id>", methods=["PUT", "PATCH"], endpoint="grades_update")
    async def grades_update(grade_id: int):
        return jsonify(_grade(await service.update(grade_id, json_body())))

    @app.route("/api/grades/<int:grade_id>", methods=["DELETE"], endpoint="grades_delete")
    async def grades_delete(grade_id: int):
        return jsonify({"deleted": await service.delete(grade_id)})
