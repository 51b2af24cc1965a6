from __future__ import annotations

from typing import Any, List

from ..common.validators import require_id
from .model import Student, Subject, Teacher
from .repository import StudentRepository, SubjectRepository, TeacherRepository


class SchoolService:
    """Read-only projections of teachers, subjects and students."""

    def __init__(self, teachers: TeacherRepository, subjects: SubjectRepository, students: StudentRepository):
        self._teachers = teachers
        self._subjects = subjects
        self._students = students

    def list_teachers(self) -> List[Teacher]:
        return list(self._teachers.list_all())

    def list_subjects(self, teacher_id: Any) -> List[Subject]:
        tid = require_id(teacher_id, "teacherId")
        return list(self._subjects.list_for_teacher(tid))

    def list_students(self) -> List[Student]:
        return list(self._students.list_all())
