from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..core.enums import StatusTier
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """One day's mark for a student.

    ``status`` is kept exactly as received; callers normalise case first
    (see ``normalize_marks``).
    """

    status: str
    attendance_date: Optional[date] = None
    subject: Optional[str] = None
    student_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        if not isinstance(data, Mapping):
            raise ValidationError("Attendance record must be an object")

        status = data.get("status")
        if not isinstance(status, str):
            raise ValidationError("Attendance record requires a status")

        raw_date = data.get("date")
        attendance_date = coerce_date(raw_date)
        if raw_date is not None and attendance_date is None:
            raise ValidationError(f"Invalid attendance date: {raw_date!r}")

        subject = data.get("subject")
        student_id = data.get("studentId")
        return cls(
            status=status,
            attendance_date=attendance_date,
            subject=str(subject) if subject else None,
            student_id=str(student_id) if student_id else None,
        )


@dataclass(frozen=True)
class AttendanceReport:
    """Summary of a sequence of attendance records, derived on every call."""

    total_days: int
    present_days: int
    absent_days: int
    percentage: int
    status: StatusTier

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "percentage": self.percentage,
            "status": self.status.value,
        }
