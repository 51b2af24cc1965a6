from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One line of a submitted batch: which student, which status."""

    student_id: int
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model of a stored record joined with its student."""

    record_id: int
    student_id: int
    teacher_id: int
    status: AttendanceStatus
    student_name: str
    roll_number: str

    def to_dict(self) -> dict:
        return {
            "recordId": self.record_id,
            "studentId": self.student_id,
            "teacherId": self.teacher_id,
            "status": self.status.value,
            "studentName": self.student_name,
            "rollNumber": self.roll_number,
        }


@dataclass(frozen=True)
class RosterLine:
    student_id: int
    student_name: str
    roll_number: str
    status: AttendanceStatus
    marked: bool

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "rollNumber": self.roll_number,
            "status": self.status.value,
            "marked": self.marked,
        }


@dataclass(frozen=True)
class Roster:
    subject_id: int
    date: date
    lines: list[RosterLine]

    @property
    def present_count(self) -> int:
        return sum(1 for line in self.lines if line.status == AttendanceStatus.PRESENT)

    @property
    def total(self) -> int:
        return len(self.lines)

    def to_dict(self) -> dict:
        return {
            "subjectId": self.subject_id,
            "date": format_iso_date(self.date),
            "students": [line.to_dict() for line in self.lines],
            "presentCount": self.present_count,
            "total": self.total,
        }
