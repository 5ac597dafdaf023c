from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import build_container
from .core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    DomainError,
    InputValidationError,
    NotFoundError,
    StateConflictError,
)
from .leaves.controller import register as register_leaves
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InputValidationError: 400,
    AuthorizationError: 403,
    NotFoundError: 404,
    StateConflictError: 409,
    ConfigurationError: 500,
}


def _register_error_handlers(app: Flask) -> None:
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in ERROR_STATUS.items() if isinstance(e, cls)), 500)
        if status >= 500:
            logger.error("Request failed: %s", e)
        return jsonify({"success": False, "message": str(e)}), status

    app.register_error_handler(DomainError, handle_domain_error)


def create_app(settings_module: Optional[str] = None, *, dataset=None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = importlib.import_module(settings_module or get_settings_module())
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting attendance engine with %s", settings.__name__)

    container = build_container(settings=settings, dataset=dataset)
    app.extensions["attendance_container"] = container

    register_attendance(app, container)
    register_leaves(app, container)
    register_reports(app, container)
    _register_error_handlers(app)

    return app
