from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, ok
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["POST"], endpoint="mark_attendance")
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return fail("Invalid request body", 400)

        try:
            stored = container.attendance_service.mark(
                body.get("teacherId"),
                body.get("subjectId"),
                body.get("date"),
                body.get("attendanceRecords"),
            )
            return ok({"stored": stored}, message="Attendance marked successfully")
        except ValidationError as e:
            return fail(str(e), 400)
        except PersistenceError as e:
            app.logger.error("Error marking attendance: %s", e)
            return fail(str(e), 500)

    @app.route("/attendance", methods=["GET"], endpoint="get_attendance")
    @app.route("/api/attendance", methods=["GET"], endpoint="get_attendance")
    def get_attendance():
        try:
            rows = container.attendance_service.get(request.args.get("subjectId"), request.args.get("date"))
            return ok([r.to_dict() for r in rows])
        except ValidationError as e:
            return fail(str(e), 400)
        except PersistenceError as e:
            app.logger.error("Error fetching attendance: %s", e)
            return fail(str(e), 500)

    @app.route("/attendance/roster", methods=["GET"], endpoint="attendance_roster")
    @app.route("/api/attendance/roster", methods=["GET"], endpoint="attendance_roster")
    def attendance_roster():
        try:
            roster = container.attendance_service.roster(request.args.get("subjectId"), request.args.get("date"))
            return ok(roster.to_dict())
        except ValidationError as e:
            return fail(str(e), 400)
        except PersistenceError as e:
            app.logger.error("Error building attendance roster: %s", e)
            return fail(str(e), 500)
