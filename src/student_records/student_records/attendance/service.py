from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Iterable

from ..common.datetime_utils import coerce_date
from ..core.constants import DEFAULT_SUBJECT
from ..core.enums import AttendanceMark
from ..core.exceptions import InvalidInputKindError
from .calculator import calculate_percentage
from .model import AttendanceRecord, AttendanceReport
from .tiers import classify

logger = logging.getLogger(__name__)

_KNOWN_MARKS = {m.value for m in AttendanceMark}


def generate_report(records: Sequence[AttendanceRecord]) -> AttendanceReport:
    """Summarise attendance records into day counts, percentage and tier.

    Only an exact ``"present"`` status counts as present; anything else is
    absent. Raises InvalidInputKindError when ``records`` is not an ordered
    sequence of AttendanceRecord.
    """
    if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
        raise InvalidInputKindError(
            f"records must be an ordered sequence, got {type(records).__name__}"
        )
    for r in records:
        if not isinstance(r, AttendanceRecord):
            raise InvalidInputKindError(
                f"records must contain AttendanceRecord items, got {type(r).__name__}"
            )

    total_days = len(records)
    present_days = sum(1 for r in records if r.status == AttendanceMark.PRESENT.value)
    percentage = calculate_percentage(present_days, total_days)

    report = AttendanceReport(
        total_days=total_days,
        present_days=present_days,
        absent_days=total_days - present_days,
        percentage=percentage,
        status=classify(percentage),
    )
    logger.debug("attendance report: %s/%s days, %s%%", present_days, total_days, percentage)
    return report


def normalize_marks(raw_items: Iterable[Any]) -> list[AttendanceRecord]:
    """Turn raw attendance-sheet rows into records, dropping unusable rows.

    A row is kept when it has a student id, a present/absent status (any
    case) and a parseable date. Missing subjects default to "General".
    """
    out: list[AttendanceRecord] = []
    for i, item in enumerate(raw_items):
        if not isinstance(item, Mapping):
            logger.debug("dropping raw mark #%s: not an object", i)
            continue

        student_id = item.get("studentId")
        status = item.get("status")
        attendance_date = coerce_date(item.get("date"))

        if not student_id:
            logger.debug("dropping raw mark #%s: missing studentId", i)
            continue
        if not isinstance(status, str) or status.lower() not in _KNOWN_MARKS:
            logger.debug("dropping raw mark #%s: unknown status %r", i, status)
            continue
        if attendance_date is None:
            logger.debug("dropping raw mark #%s: invalid date %r", i, item.get("date"))
            continue

        out.append(
            AttendanceRecord(
                status=status.lower(),
                attendance_date=attendance_date,
                subject=item.get("subject") or DEFAULT_SUBJECT,
                student_id=str(student_id),
            )
        )
    return out
