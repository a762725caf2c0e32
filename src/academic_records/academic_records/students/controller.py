from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.fields import to_dict
from ..common.http import json_body
from ..core.constants import FILTER_ALL
from ..query.pipeline import ASC, StudentFilter
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    async def students_list():
        flt = StudentFilter(
            text=request.args.get("q", ""),
            grade_level=request.args.get("grade_level", FILTER_ALL),
            status=request.args.get("status", FILTER_ALL),
        )
        students = await service.list_students(
            flt=flt,
            sort=request.args.get("sort", "name"),
            direction=request.args.get("direction", ASC),
        )
        return jsonify([to_dict(s) for s in students])

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    async def students_create():
        student = await service.create(json_body())
        return jsonify(to_dict(student)), 201

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="students_get")
    async def students_get(student_id: int):
        return jsonify(to_dict(await service.get(student_id)))

    @app.route("/api/students/<int:student_id>", methods=["PUT", "PATCH"], endpoint="students_update")
    async def students_update(student_id: int):
        return jsonify(to_dict(await service.update(student_id, json_body())))

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="students_delete")
    async def students_delete(student_id: int):
        return jsonify({"deleted": await service.delete(student_id)})
