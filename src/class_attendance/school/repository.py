from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student, Subject, Teacher


class TeacherRepository(Protocol):
    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError


class SubjectRepository(Protocol):
    def list_for_teacher(self, teacher_id: int) -> Sequence[Subject]:
        raise NotImplementedError


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        """All students ordered by roll number."""

        raise NotImplementedError
