"""Shared pytest fixtures for the log code utilities."""

import pytest

from logcodes.models import LogCode
from logcodes.webhook import create_app


@pytest.fixture
def sample_log_codes():
    return [
        LogCode(100, "ERROR", "Unexpected null pointer encountered.", "ERROR_NULL_POINTER"),
        LogCode(200, "WARN", "Data format mismatch, falling back to default.", "WARN_DATA_FORMAT_MISMATCH"),
        LogCode(300, "INFO", "Database connection successfully established.", "INFO_DB_CONNECTION_ESTABLISHED"),
    ]


@pytest.fixture
def catalog_yaml():
    return """\
appName: test-app
logCodes:
  - code: 100
    level: ERROR
    description: Unexpected null pointer encountered.
    humanReadableCode: ERROR_NULL_POINTER
  - code: 200
    level: WARN
    description: Data format mismatch, falling back to default.
    humanReadableCode: WARN_DATA_FORMAT_MISMATCH
  - code: 300
    level: INFO
    description: Database connection successfully established.
    humanReadableCode: INFO_DB_CONNECTION_ESTABLISHED
"""


@pytest.fixture
def catalog_file(tmp_path, catalog_yaml):
    path = tmp_path / "log_codes.yaml"
    path.write_text(catalog_yaml)
    return path


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "log.txt"


@pytest.fixture
def app(output_file):
    application = create_app(str(output_file))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()
