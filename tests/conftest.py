from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

import pytest

from class_attendance.attendance.model import AttendanceEntry, AttendanceRow
from class_attendance.attendance.service import AttendanceService
from class_attendance.container import Container
from class_attendance.core.exceptions import PersistenceError
from class_attendance.main import create_app
from class_attendance.school.model import Student, Subject, Teacher
from class_attendance.school.service import SchoolService


@dataclass
class InMemoryTeachers:
    teachers: list[Teacher]
    error: Optional[str] = None

    def list_all(self) -> Sequence[Teacher]:
        if self.error:
            raise PersistenceError(self.error)
        return sorted(self.teachers, key=lambda t: (t.name, t.teacher_id))


@dataclass
class InMemorySubjects:
    subjects: list[Subject]

    def list_for_teacher(self, teacher_id: int) -> Sequence[Subject]:
        items = [s for s in self.subjects if s.teacher_id == teacher_id]
        return sorted(items, key=lambda s: (s.name, s.subject_id))


@dataclass
class InMemoryStudents:
    students: list[Student]

    def list_all(self) -> Sequence[Student]:
        return sorted(self.students, key=lambda s: (s.roll_number, s.student_id))


@dataclass
class _StoredRow:
    record_id: int
    teacher_id: int
    status: object


@dataclass
class InMemoryAttendance:
    """Mirrors the MySQL repository: unique (student, subject, date), upsert keeps the record id."""

    students: InMemoryStudents
    rows: dict[tuple[int, int, date], _StoredRow] = field(default_factory=dict)
    error: Optional[str] = None
    _next_id: int = 0

    def replace_for_subject_date(self, *, teacher_id: int, subject_id: int, work_date: date, entries: Sequence[AttendanceEntry]) -> int:
        if self.error:
            raise PersistenceError(self.error)

        keep = {e.student_id for e in entries}
        for key in list(self.rows):
            student_id, sub_id, day = key
            if sub_id == subject_id and day == work_date and student_id not in keep:
                del self.rows[key]

        for e in entries:
            key = (e.student_id, subject_id, work_date)
            existing = self.rows.get(key)
            if existing:
                existing.teacher_id = teacher_id
                existing.status = e.status
            else:
                self._next_id += 1
                self.rows[key] = _StoredRow(record_id=self._next_id, teacher_id=teacher_id, status=e.status)
        return len(entries)

    def get_for_subject_date(self, *, subject_id: int, work_date: date) -> Sequence[AttendanceRow]:
        if self.error:
            raise PersistenceError(self.error)

        by_id = {s.student_id: s for s in self.students.students}
        result = []
        for (student_id, sub_id, day), stored in self.rows.items():
            if sub_id != subject_id or day != work_date:
                continue
            student = by_id[student_id]
            result.append(
                AttendanceRow(
                    record_id=stored.record_id,
                    student_id=student_id,
                    teacher_id=stored.teacher_id,
                    status=stored.status,
                    student_name=student.name,
                    roll_number=student.roll_number,
                )
            )
        result.sort(key=lambda r: (r.roll_number, r.student_id))
        return result


class FakePool:
    def __init__(self):
        self.closed = False

    def connect(self):
        raise AssertionError("tests must not open database connections")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def students_repo() -> InMemoryStudents:
    # Inserted out of roll order on purpose.
    return InMemoryStudents(
        [
            Student(student_id=6, name="Fatima Khan", roll_number="006"),
            Student(student_id=5, name="Ethan Brown", roll_number="005"),
            Student(student_id=7, name="George Miller", roll_number="007"),
        ]
    )


@pytest.fixture
def teachers_repo() -> InMemoryTeachers:
    return InMemoryTeachers(
        [
            Teacher(teacher_id=2, name="Brian Smith", email="brian@school.edu"),
            Teacher(teacher_id=1, name="Alice Johnson", email="alice@school.edu"),
        ]
    )


@pytest.fixture
def subjects_repo() -> InMemorySubjects:
    return InMemorySubjects(
        [
            Subject(subject_id=11, name="Physics", teacher_id=1),
            Subject(subject_id=10, name="Mathematics", teacher_id=1),
            Subject(subject_id=12, name="History", teacher_id=2),
        ]
    )


@pytest.fixture
def attendance_repo(students_repo) -> InMemoryAttendance:
    return InMemoryAttendance(students_repo)


@pytest.fixture
def attendance_service(attendance_repo, students_repo) -> AttendanceService:
    return AttendanceService(attendance_repo, students_repo)


@pytest.fixture
def school_service(teachers_repo, subjects_repo, students_repo) -> SchoolService:
    return SchoolService(teachers_repo, subjects_repo, students_repo)


@pytest.fixture
def container(teachers_repo, subjects_repo, students_repo, attendance_repo, school_service, attendance_service) -> Container:
    return Container(
        pool=FakePool(),
        teachers_repo=teachers_repo,
        subjects_repo=subjects_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        school_service=school_service,
        attendance_service=attendance_service,
    )


@pytest.fixture
def client(container):
    app = create_app(container=container, settings_module="config.testing")
    return app.test_client()
