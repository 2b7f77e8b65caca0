from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.formatting import format_display_date, format_student_id
from ..core.exceptions import ValidationError
from ..students.model import StudentRecord
from ..students.service import process_students
from ..students.validator import DIVISION_ERROR, ROLL_NO_ERROR, validate


def register(app: Flask) -> None:
    @app.route("/api/students/validate", methods=["POST"], endpoint="students_validate")
    def students_validate():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Body must be a student object")
        return jsonify(validate(StudentRecord.from_dict(data)).to_dict())

    @app.route("/api/students/process", methods=["POST"], endpoint="students_process")
    def students_process():
        data = request.get_json(silent=True)
        students = data.get("students") if isinstance(data, dict) else None
        if not isinstance(students, list) or not all(isinstance(s, dict) for s in students):
            raise ValidationError("Body must contain a 'students' list")
        return jsonify({"students": [s.to_dict() for s in process_students(students)]})

    @app.route("/api/students/id", methods=["GET"], endpoint="students_id")
    def students_id():
        roll_no = request.args.get("rollNo", "")
        division = request.args.get("division", "")

        # Reuse the record rules so IDs are only minted for valid pairs.
        errors = validate(StudentRecord(roll_no=roll_no, division=division)).errors
        problems = [e for e in errors if e in (ROLL_NO_ERROR, DIVISION_ERROR)]
        if problems:
            raise ValidationError("; ".join(problems))
        return jsonify({"studentId": format_student_id(roll_no, division)})

    @app.route("/api/format/date", methods=["GET"], endpoint="format_date")
    def format_date():
        return jsonify({"display": format_display_date(request.args.get("date"))})
