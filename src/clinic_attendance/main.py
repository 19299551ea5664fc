from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .common.logger import register_request_logging, setup_logger
from .config import get_settings_module
from .container import build_container
from .core.exceptions import DomainError
from .portal.controller import register as register_portal
from .staff.memory_staff_repository import InMemoryStaffRepository

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return jsonify(e.to_dict()), e.http_status

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def _unexpected_error(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return jsonify({"success": False, "message": "Internal server error"}), 500


def create_app(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    staff_repo: InMemoryStaffRepository | None = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    if overrides:
        app.config.update(overrides)

    app_logger = setup_logger(app.config.get("LOG_LEVEL", "INFO"), app.config.get("LOG_FILE"))
    app_logger.info("settings=%s debug=%s", settings_module, app.config.get("DEBUG"))

    container = build_container(app.config, staff_repo=staff_repo)
    app.extensions["clinic_attendance"] = container

    register_request_logging(app, app_logger)
    register_error_handlers(app)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    register_auth(app, container)
    register_attendance(app, container)
    register_portal(app, container)

    return app


def run() -> None:
    """Console entry point: development server."""
    app = create_app()
    app.run(host="0.0.0.0", port=int(app.config.get("PORT", 5000)), debug=bool(app.config.get("DEBUG")))


if __name__ == "__main__":
    run()
