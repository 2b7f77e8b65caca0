"""Example: use the core functions directly (no Flask).

Controllers are only a thin layer; the rules live in the core modules.
"""

from student_records import (
    AttendanceRecord,
    StudentRecord,
    format_display_date,
    format_student_id,
    generate_report,
    validate,
)


def main():
    records = [AttendanceRecord(status=s) for s in ("present", "present", "absent", "present")]
    print(generate_report(records).to_dict())

    student = StudentRecord(name="Ayush Aditya", email="ayush@example.com", roll_no="1", division="I")
    print(validate(student).to_dict())
    print(format_student_id(student.roll_no, student.division), format_display_date("2024-01-15"))


if __name__ == "__main__":
    main()
