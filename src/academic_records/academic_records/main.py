from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import load_settings

from .container import build_container
from .core.exceptions import NotFoundError, TransientError, ValidationError
from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .grades.controller import register as register_grades
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFoundError)
    def not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(ValidationError)
    def invalid(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(TransientError)
    def unavailable(e: TransientError):
        return jsonify({"error": str(e)}), 503


def create_app(settings: Optional[Mapping[str, Any]] = None) -> Flask:
    if settings is None:
        load_dotenv(override=False)
        settings = load_settings()

    logging.basicConfig(level=str(settings.get("LOG_LEVEL", "INFO")).upper())

    app = Flask(__name__)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    container = build_container(settings=settings)
    app.extensions["academic_records"] = container

    logger.info(
        "academic-records ready (latency_scale=%s, seed=%s)",
        settings.get("STORE_LATENCY_SCALE"),
        settings.get("SEED_PATH") if settings.get("AUTO_SEED") else "off",
    )

    _register_error_handlers(app)
    register_students(app, container)
    register_classes(app, container)
    register_grades(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
