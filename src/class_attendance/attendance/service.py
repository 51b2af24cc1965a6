from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, List, Sequence

from ..common.validators import require_date, require_id, require_list, require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..school.repository import StudentRepository
from .model import AttendanceEntry, AttendanceRow, Roster, RosterLine
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def collapse_entries(entries: Sequence[AttendanceEntry]) -> List[AttendanceEntry]:
    """Keep one entry per student: the last status wins, first position is kept."""
    latest: dict[int, AttendanceEntry] = {}
    for entry in entries:
        latest[entry.student_id] = entry
    return list(latest.values())


def parse_entries(records: Any) -> List[AttendanceEntry]:
    items = require_list(records, "attendanceRecords")
    entries: List[AttendanceEntry] = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ValidationError(f"attendanceRecords[{index}] must be an object")
        entries.append(
            AttendanceEntry(
                student_id=require_id(item.get("studentId"), f"attendanceRecords[{index}].studentId"),
                status=require_status(item.get("status"), f"attendanceRecords[{index}].status"),
            )
        )
    return entries


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def mark(self, teacher_id: Any, subject_id: Any, work_date: Any, records: Any) -> int:
        """Replace the attendance of ``subject_id`` on ``work_date`` with ``records``.

        ``records`` is a list of ``{"studentId", "status"}`` mappings. An empty
        list clears the day. Returns the number of rows stored.
        """

        tid = require_id(teacher_id, "teacherId")
        sid = require_id(subject_id, "subjectId")
        day = require_date(work_date)
        entries = collapse_entries(parse_entries(records))

        stored = self._attendance.replace_for_subject_date(
            teacher_id=tid,
            subject_id=sid,
            work_date=day,
            entries=entries,
        )
        logger.info("Marked attendance subject=%s date=%s teacher=%s rows=%s", sid, day, tid, stored)
        return stored

    def get(self, subject_id: Any, work_date: Any) -> List[AttendanceRow]:
        sid = require_id(subject_id, "subjectId")
        day = require_date(work_date)
        return list(self._attendance.get_for_subject_date(subject_id=sid, work_date=day))

    def roster(self, subject_id: Any, work_date: Any) -> Roster:
        """Every student with the stored status, defaulting to absent when unmarked."""
        sid = require_id(subject_id, "subjectId")
        day: date = require_date(work_date)

        stored = {row.student_id: row.status for row in self._attendance.get_for_subject_date(subject_id=sid, work_date=day)}
        lines = [
            RosterLine(
                student_id=s.student_id,
                student_name=s.name,
                roll_number=s.roll_number,
                status=stored.get(s.student_id, AttendanceStatus.ABSENT),
                marked=s.student_id in stored,
            )
            for s in self._students.list_all()
        ]
        return Roster(subject_id=sid, date=day, lines=lines)
