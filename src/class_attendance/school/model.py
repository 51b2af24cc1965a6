from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    teacher_id: int
    name: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.teacher_id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class Subject:
    subject_id: int
    name: str
    teacher_id: int

    def to_dict(self) -> dict:
        return {"id": self.subject_id, "name": self.name, "teacherId": self.teacher_id}


@dataclass(frozen=True)
class Student:
    student_id: int
    name: str
    roll_number: str

    def to_dict(self) -> dict:
        return {"id": self.student_id, "name": self.name, "rollNumber": self.roll_number}
