from __future__ import annotations

from flask import Flask

from ..common.responses import fail, ok
from ..core.exceptions import PersistenceError
from ..container import Container
from .bootstrap import apply_schema


def register(app: Flask, container: Container) -> None:
    @app.route("/init-db", methods=["GET"], endpoint="init_db")
    @app.route("/api/init-db", methods=["GET"], endpoint="init_db")
    def init_db():
        try:
            apply_schema(container.pool)
            return ok(message="Database initialized successfully")
        except PersistenceError as e:
            app.logger.error("Database initialization error: %s", e)
            return fail(str(e), 500)
        except OSError as e:
            app.logger.exception("Schema file could not be read")
            return fail(str(e), 500)
