from __future__ import annotations

from flask import Flask, jsonify

from ..common.fields import to_dict
from ..common.http import int_arg, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.class_service

    def _occupancy(o) -> dict:
        return {"count": o.count, "capacity": o.capacity, "rate": o.rate, "displayRate": o.display_rate}

    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    async def classes_list():
        grade_level = int_arg("grade_level")
        if grade_level is None:
            classes = await service.list_classes()
        else:
            classes = await service.list_for_grade_level(grade_level)
        return jsonify([to_dict(c) for c in classes])

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    async def classes_create():
        return jsonify(to_dict(await service.create(json_body()))), 201

    @app.route("/api/classes/overview", methods=["GET"], endpoint="classes_overview")
    async def classes_overview():
        rows = await service.overview()
        return jsonify([{**to_dict(r.section), "occupancy": _occupancy(r.occupancy)} for r in rows])

    @app.route("/api/classes/<int:class_id>", methods=["GET"], endpoint="classes_get")
    async def classes_get(class_id: int):
        return jsonify(to_dict(await service.get(class_id)))

    @app.route("/api/classes/<int:class_id>", methods=["PUT", "PATCH"], endpoint="classes_update")
    async def classes_update(class_id: int):
        return jsonify(to_dict(await service.update(class_id, json_body())))

    @app.route("/api/classes/<int:class_id>", methods=["DELETE"], endpoint="classes_delete")
    async def classes_delete(class_id: int):
        return jsonify({"deleted": await service.delete(class_id)})

    @app.route("/api/classes/<int:class_id>/roster", methods=["GET"], endpoint="classes_roster")
    async def classes_roster(class_id: int):
        return jsonify([to_dict(s) for s in await service.roster(class_id)])
