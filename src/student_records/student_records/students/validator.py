from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Union

from ..core.constants import MIN_NAME_LENGTH
from ..core.enums import Division
from .model import StudentRecord, ValidationResult

NAME_ERROR = "Name must be at least 2 characters"
EMAIL_ERROR = "Valid email is required"
ROLL_NO_ERROR = "Valid roll number is required"
DIVISION_ERROR = "Division must be I or II"

# Deliberately loose: local@domain.tld, no whitespace or extra "@".
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_ROLL_NO_RE = re.compile(r"[0-9]+")
_DIVISIONS = {d.value for d in Division}


def is_valid_email(value: Optional[str]) -> bool:
    if not isinstance(value, str):
        return False
    return _EMAIL_RE.fullmatch(value) is not None


def _name_ok(name: Optional[str]) -> bool:
    return bool(name) and len(name.strip()) >= MIN_NAME_LENGTH


def _roll_no_ok(roll_no: Optional[str]) -> bool:
    return bool(roll_no) and _ROLL_NO_RE.fullmatch(roll_no) is not None


def validate(student: Union[StudentRecord, Mapping[str, Any]]) -> ValidationResult:
    """Check a student against all field rules.

    Every rule runs, so one record can collect several errors; they are
    reported in the order name, email, roll number, division.
    """
    if not isinstance(student, StudentRecord):
        student = StudentRecord.from_dict(student)

    errors: list[str] = []
    if not _name_ok(student.name):
        errors.append(NAME_ERROR)
    if not is_valid_email(student.email):
        errors.append(EMAIL_ERROR)
    if not _roll_no_ok(student.roll_no):
        errors.append(ROLL_NO_ERROR)
    if student.division not in _DIVISIONS:
        errors.append(DIVISION_ERROR)

    return ValidationResult(errors=tuple(errors))
