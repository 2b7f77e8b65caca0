from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import AttendanceRecord
from ..attendance.service import generate_report, normalize_marks
from ..core.exceptions import ValidationError


def _records_payload() -> list:
    data = request.get_json(silent=True)
    records = data.get("records") if isinstance(data, dict) else None
    if not isinstance(records, list):
        raise ValidationError("Body must contain a 'records' list")
    return records


def register(app: Flask) -> None:
    @app.route("/api/attendance/report", methods=["POST"], endpoint="attendance_report")
    def attendance_report():
        records = [AttendanceRecord.from_dict(r) for r in _records_payload()]
        return jsonify(generate_report(records).to_dict())

    @app.route("/api/attendance/normalize", methods=["POST"], endpoint="attendance_normalize")
    def attendance_normalize():
        records = normalize_marks(_records_payload())
        return jsonify(
            {
                "records": [
                    {
                        "studentId": r.student_id,
                        "status": r.status,
                        "date": r.attendance_date.isoformat(),
                        "subject": r.subject,
                    }
                    for r in records
                ]
            }
        )
