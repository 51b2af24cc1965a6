from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.responses import fail
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_database_exists, list_tables
from .attendance.controller import register as register_attendance
from .database.controller import register as register_database
from .school.controller import register as register_school


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error on request")
        return fail(str(e) or "Unknown error", 500)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = dict(getattr(settings, "DB_CONFIG"))
        auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
        auto_seed_db = bool(getattr(settings, "AUTO_SEED_DB", False))
        if auto_init_db:
            ensure_database_exists(db_config)

        container = build_container(
            db_config=db_config,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", 5)),
        )
        atexit.register(container.close)

        if auto_init_db:
            apply_schema(container.pool)
            app.logger.info("Schema ready (tables=%s)", len(list_tables(container.pool)))
        if auto_seed_db:
            apply_seed_sql(container.pool)
            app.logger.info("Demo seed ready")

    app.extensions["class_attendance"] = container

    _register_error_handlers(app)
    register_school(app, container)
    register_attendance(app, container)
    register_database(app, container)

    return app
