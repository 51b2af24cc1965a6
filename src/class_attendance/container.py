from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabasePool
from .school.mysql_school_repository import (
    MySQLStudentRepository,
    MySQLSubjectRepository,
    MySQLTeacherRepository,
)
from .school.repository import StudentRepository, SubjectRepository, TeacherRepository
from .school.service import SchoolService


@dataclass(frozen=True)
class Container:
    pool: DatabasePool

    teachers_repo: TeacherRepository
    subjects_repo: SubjectRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    school_service: SchoolService
    attendance_service: AttendanceService

    def close(self) -> None:
        self.pool.close()


def build_container(*, db_config: dict, pool_size: int = DEFAULT_POOL_SIZE) -> Container:
    pool = DatabasePool(DBConfig.from_dict(db_config), pool_size=pool_size)

    teachers_repo = MySQLTeacherRepository(pool)
    subjects_repo = MySQLSubjectRepository(pool)
    students_repo = MySQLStudentRepository(pool)
    attendance_repo = MySQLAttendanceRepository(pool)

    school_service = SchoolService(teachers_repo, subjects_repo, students_repo)
    attendance_service = AttendanceService(attendance_repo, students_repo)

    return Container(
        pool=pool,
        teachers_repo=teachers_repo,
        subjects_repo=subjects_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        school_service=school_service,
        attendance_service=attendance_service,
    )
