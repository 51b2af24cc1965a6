from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..core.constants import DEFAULT_ISOLATION_LEVEL
from ..core.enums import AttendanceStatus
from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchall, placeholders
from .model import AttendanceEntry, AttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabasePool):
        self._conn_factory = conn_factory

    def replace_for_subject_date(
        self,
        *,
        teacher_id: int,
        subject_id: int,
        work_date: date,
        entries: Sequence[AttendanceEntry],
    ) -> int:
        student_ids = [e.student_id for e in entries]

        with db_cursor(self._conn_factory, isolation_level=DEFAULT_ISOLATION_LEVEL) as (_, cur):
            # Concurrent marks for the same subject queue behind this lock.
            cur.execute("SELECT id FROM subjects WHERE id=%s FOR UPDATE", (subject_id,))
            fetchall(cur)

            if student_ids:
                cur.execute(
                    f"""
                    DELETE FROM attendance
                    WHERE subject_id=%s AND date=%s AND student_id NOT IN ({placeholders(len(student_ids))})
                    """,
                    (subject_id, work_date, *student_ids),
                )
            else:
                cur.execute(
                    "DELETE FROM attendance WHERE subject_id=%s AND date=%s",
                    (subject_id, work_date),
                )
            removed = cur.rowcount

            if entries:
                values_sql = ", ".join(["(%s, %s, %s, %s, %s)"] * len(entries))
                params: list[object] = []
                for e in entries:
                    params.extend([e.student_id, subject_id, teacher_id, work_date, e.status.value])
                cur.execute(
                    f"""
                    INSERT INTO attendance (student_id, subject_id, teacher_id, date, status)
                    VALUES {values_sql} AS new
                    ON DUPLICATE KEY UPDATE status=new.status, teacher_id=new.teacher_id
                    """,
                    tuple(params),
                )

        logger.debug(
            "Replaced attendance subject=%s date=%s: stored=%s removed=%s",
            subject_id, work_date, len(entries), removed,
        )
        return len(entries)

    def get_for_subject_date(self, *, subject_id: int, work_date: date) -> Sequence[AttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.student_id, a.teacher_id, a.status, s.name, s.roll_number
                FROM attendance a
                JOIN students s ON s.id = a.student_id
                WHERE a.subject_id=%s AND a.date=%s
                ORDER BY s.roll_number ASC, s.id ASC
                """,
                (subject_id, work_date),
            )
            rows = fetchall(cur)
            return [
                AttendanceRow(
                    record_id=int(r["id"]),
                    student_id=int(r["student_id"]),
                    teacher_id=int(r["teacher_id"]),
                    status=AttendanceStatus(r["status"]),
                    student_name=r["name"],
                    roll_number=str(r["roll_number"]),
                )
                for r in rows
            ]
