from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from ..core.exceptions import DomainError
from .attendance_controller import register as register_attendance
from .students_controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = bool(getattr(settings, "JSON_SORT_KEYS", False))

    logging.getLogger("student_records").setLevel(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("student-records settings=%s", settings_module)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled error in request")
        return jsonify({"success": False, "message": "Internal server error"}), 500

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_attendance(app)
    register_students(app)

    return app
