from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, ok
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/teachers", methods=["GET"], endpoint="list_teachers")
    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    def list_teachers():
        try:
            return ok([t.to_dict() for t in container.school_service.list_teachers()])
        except PersistenceError as e:
            app.logger.error("Error fetching teachers: %s", e)
            return fail(str(e), 500)

    @app.route("/subjects", methods=["GET"], endpoint="list_subjects")
    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        try:
            subjects = container.school_service.list_subjects(request.args.get("teacherId"))
            return ok([s.to_dict() for s in subjects])
        except ValidationError as e:
            return fail(str(e), 400)
        except PersistenceError as e:
            app.logger.error("Error fetching subjects: %s", e)
            return fail(str(e), 500)

    @app.route("/students", methods=["GET"], endpoint="list_students")
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            return ok([s.to_dict() for s in container.school_service.list_students()])
        except PersistenceError as e:
            app.logger.error("Error fetching students: %s", e)
            return fail(str(e), 500)
