from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceEntry, AttendanceRow


class AttendanceRepository(Protocol):
    def replace_for_subject_date(
        self,
        *,
        teacher_id: int,
        subject_id: int,
        work_date: date,
        entries: Sequence[AttendanceEntry],
    ) -> int:
        """Make the stored rows for (subject, date) equal ``entries``.

        Entries must carry distinct student ids. Runs as one transaction.
        """

        raise NotImplementedError

    def get_for_subject_date(self, *, subject_id: int, work_date: date) -> Sequence[AttendanceRow]:
        raise NotImplementedError
