from __future__ import annotations

import pytest

from student_records.api.app import create_app


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
