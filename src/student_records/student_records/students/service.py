from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from ..common.formatting import format_display_name
from .model import KNOWN_FIELDS, ProcessedStudent, StudentRecord
from .validator import is_valid_email


def process_students(
    students: Iterable[Union[StudentRecord, Mapping[str, Any]]],
) -> list[ProcessedStudent]:
    """Prepare a student list for display: upper-cased names, email flag.

    Unknown keys of mapping payloads are kept on ``extra``.
    """
    out: list[ProcessedStudent] = []
    for s in students:
        extra: dict = {}
        if not isinstance(s, StudentRecord):
            record = StudentRecord.from_dict(s)
            extra = {k: v for k, v in s.items() if k not in KNOWN_FIELDS}
        else:
            record = s
        out.append(
            ProcessedStudent(
                name=format_display_name(record.name or ""),
                email=record.email,
                roll_no=record.roll_no,
                division=record.division,
                is_valid=is_valid_email(record.email),
                extra=extra,
            )
        )
    return out
