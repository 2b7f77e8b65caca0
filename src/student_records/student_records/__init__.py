"""Student Records package.

Pure attendance/student logic lives in feature modules (attendance, students,
common). A thin Flask layer in ``api`` adapts it to JSON over HTTP.
"""

from .attendance.calculator import calculate_percentage
from .attendance.model import AttendanceRecord, AttendanceReport
from .attendance.service import generate_report, normalize_marks
from .common.formatting import format_display_date, format_display_name, format_student_id
from .core.enums import AttendanceMark, Division, StatusTier
from .core.exceptions import DomainError, InvalidInputKindError, ValidationError
from .students.model import ProcessedStudent, StudentRecord, ValidationResult
from .students.service import process_students
from .students.validator import is_valid_email, validate

__all__ = [
    "AttendanceMark",
    "AttendanceRecord",
    "AttendanceReport",
    "Division",
    "DomainError",
    "InvalidInputKindError",
    "ProcessedStudent",
    "StatusTier",
    "StudentRecord",
    "ValidationError",
    "ValidationResult",
    "calculate_percentage",
    "format_display_date",
    "format_display_name",
    "format_student_id",
    "generate_report",
    "is_valid_email",
    "normalize_marks",
    "process_students",
    "validate",
]
