import pytest

from student_records.attendance.model import AttendanceRecord
from student_records.attendance.service import generate_report
from student_records.attendance.tiers import classify
from student_records.core.enums import StatusTier
from student_records.core.exceptions import InvalidInputKindError


def _records(*statuses):
    return [AttendanceRecord(status=s) for s in statuses]


def test_report_good_attendance():
    report = generate_report(_records("present", "present", "present", "present", "absent"))

    assert report.total_days == 5
    assert report.present_days == 4
    assert report.absent_days == 1
    assert report.percentage == 80
    assert report.status == StatusTier.GOOD


def test_report_warning_attendance():
    report = generate_report(_records("present", "present", "absent", "absent"))
    assert report.percentage == 50
    assert report.status == StatusTier.WARNING


def test_report_critical_attendance():
    report = generate_report(_records("present", "absent", "absent", "absent"))
    assert report.percentage == 25
    assert report.status == StatusTier.CRITICAL


def test_report_empty_records_is_critical():
    report = generate_report([])

    assert report.total_days == 0
    assert report.present_days == 0
    assert report.absent_days == 0
    assert report.percentage == 0
    assert report.status == StatusTier.CRITICAL


def test_report_status_match_is_case_sensitive():
    report = generate_report(_records("present", "Present", "PRESENT", "late"))
    assert report.present_days == 1
    assert report.absent_days == 3


def test_report_accepts_tuple():
    report = generate_report(tuple(_records("present", "absent")))
    assert report.total_days == 2
    assert report.present_days + report.absent_days == report.total_days


def test_report_to_dict_uses_wire_names():
    assert generate_report(_records("present")).to_dict() == {
        "totalDays": 1,
        "presentDays": 1,
        "absentDays": 0,
        "percentage": 100,
        "status": "Good",
    }


@pytest.mark.parametrize(
    "percentage, tier",
    [
        (100, StatusTier.GOOD),
        (80, StatusTier.GOOD),
        (75, StatusTier.GOOD),
        (74, StatusTier.WARNING),
        (50, StatusTier.WARNING),
        (49, StatusTier.CRITICAL),
        (25, StatusTier.CRITICAL),
        (0, StatusTier.CRITICAL),
    ],
)
def test_classify_boundaries(percentage, tier):
    assert classify(percentage) == tier


@pytest.mark.parametrize("bad", [None, 42, "present", {"status": "present"}, {AttendanceRecord("present")}])
def test_report_rejects_non_sequence(bad):
    with pytest.raises(InvalidInputKindError):
        generate_report(bad)


def test_report_rejects_raw_dict_items():
    with pytest.raises(InvalidInputKindError):
        generate_report([{"status": "present"}])


def test_invalid_input_kind_is_a_type_error():
    with pytest.raises(TypeError):
        generate_report(None)
