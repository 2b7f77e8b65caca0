"""Development entry point: ``python app.py`` or ``flask --app app run``."""

import logging

from student_records.api.app import create_app

logging.basicConfig(level=logging.INFO)

app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
