from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchall
from .model import Student, Subject, Teacher
from .repository import StudentRepository, SubjectRepository, TeacherRepository


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabasePool):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, email FROM teachers ORDER BY name ASC, id ASC")
            rows = fetchall(cur)
            return [Teacher(teacher_id=int(r["id"]), name=r["name"], email=r["email"]) for r in rows]


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabasePool):
        self._conn_factory = conn_factory

    def list_for_teacher(self, teacher_id: int) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, teacher_id
                FROM subjects
                WHERE teacher_id=%s
                ORDER BY name ASC, id ASC
                """,
                (int(teacher_id),),
            )
            rows = fetchall(cur)
            return [
                Subject(subject_id=int(r["id"]), name=r["name"], teacher_id=int(r["teacher_id"]))
                for r in rows
            ]


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabasePool):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, roll_number FROM students ORDER BY roll_number ASC, id ASC")
            rows = fetchall(cur)
            return [
                Student(student_id=int(r["id"]), name=r["name"], roll_number=str(r["roll_number"]))
                for r in rows
            ]
