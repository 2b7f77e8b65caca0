from datetime import date

import pytest

from student_records.attendance.model import AttendanceRecord
from student_records.attendance.service import normalize_marks
from student_records.core.exceptions import ValidationError


def test_record_from_dict_keeps_metadata():
    r = AttendanceRecord.from_dict({"status": "present", "date": "2024-01-15", "subject": "Math", "studentId": "1"})

    assert r.status == "present"
    assert r.attendance_date == date(2024, 1, 15)
    assert r.subject == "Math"
    assert r.student_id == "1"


def test_record_from_dict_keeps_status_case():
    assert AttendanceRecord.from_dict({"status": "PRESENT"}).status == "PRESENT"


@pytest.mark.parametrize("data", [{}, {"status": None}, {"status": 1}, ["present"]])
def test_record_from_dict_requires_status(data):
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(data)


def test_record_from_dict_rejects_bad_date():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict({"status": "present", "date": "not-a-date"})


def test_normalize_marks_filters_and_defaults():
    raw = [
        {"studentId": "1", "status": "PRESENT", "date": "2024-01-15", "subject": "Math"},
        {"studentId": "2", "status": "absent", "date": "2024-01-15"},
        {"studentId": "3", "status": "invalid", "date": "2024-01-15"},
        {"studentId": "", "status": "present", "date": "2024-01-15"},
    ]

    out = normalize_marks(raw)

    assert len(out) == 2
    assert out[0].status == "present"
    assert out[0].subject == "Math"
    assert out[1].status == "absent"
    assert out[1].subject == "General"


def test_normalize_marks_drops_invalid_dates():
    raw = [
        {"studentId": "1", "status": "present", "date": "invalid-date"},
        {"studentId": "2", "status": "present", "date": "2024-01-15"},
    ]

    out = normalize_marks(raw)

    assert [r.student_id for r in out] == ["2"]


def test_normalize_marks_drops_non_dashed_dates():
    raw = [
        {"studentId": "1", "status": "present", "date": "20240115"},
        {"studentId": "2", "status": "present", "date": "2024-W03-1"},
        {"studentId": "3", "status": "present", "date": "2024-01-15T08:00:00"},
    ]

    out = normalize_marks(raw)

    assert [r.student_id for r in out] == ["3"]
    assert out[0].attendance_date == date(2024, 1, 15)
