"""Shared fixtures for the email resource tests."""

import json
import logging
from datetime import datetime, timezone
from unittest.mock import MagicMock, Mock

import pytest

from email_resource.logging.config import ContextualFilter
from email_resource.logging.context import clear_log_context


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Remove the handler installed by configure_logging() and restore the level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if any(isinstance(f, ContextualFilter) for f in handler.filters):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def build_env():
    """Build metadata exported by the CI runner."""
    return {
        "BUILD_ID": "42",
        "BUILD_NAME": "7",
        "BUILD_JOB_NAME": "deploy",
        "BUILD_PIPELINE_NAME": "release",
        "ATC_EXTERNAL_URL": "https://ci.example.com",
        "BUILD_TEAM_NAME": "main",
    }


@pytest.fixture
def fixed_time():
    return datetime(2025, 11, 4, 10, 30, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def sources_dir(tmp_path):
    """Build-sources root with typical message files."""
    out = tmp_path / "out"
    out.mkdir()
    (out / "subject.txt").write_text("Build ${BUILD_ID} of ${BUILD_PIPELINE_NAME}\n")
    (out / "body.txt").write_text("See ${ATC_EXTERNAL_URL}/builds/${BUILD_ID}\n")
    (out / "headers.txt").write_text("X-Build: ${BUILD_ID}\nX-Team: ${BUILD_TEAM_NAME}\n")
    (out / "recipients.txt").write_text("ops@example.com, dev@example.com\n")
    (out / "empty.txt").write_text("")
    return tmp_path


@pytest.fixture
def request_dict():
    """Valid authenticated request referencing the files in sources_dir."""
    return {
        "source": {
            "smtp": {
                "host": "smtp.example.com",
                "port": "587",
                "username": "ci-bot",
                "password": "s3cret",
            },
            "from": "ci@example.com",
            "to": ["team@example.com"],
        },
        "params": {
            "subject": "out/subject.txt",
            "body": "out/body.txt",
        },
    }


@pytest.fixture
def to_json():
    """Serialize a request dict the way the CI runner writes it to stdin."""

    def _to_json(data) -> bytes:
        return json.dumps(data).encode("utf-8")

    return _to_json


@pytest.fixture
def mock_smtp():
    """SMTP connection double advertising STARTTLS and accepting all recipients."""
    smtp = MagicMock()
    smtp.has_extn.return_value = True
    smtp.sendmail.return_value = {}
    return smtp


@pytest.fixture
def smtp_factory(mock_smtp):
    return Mock(return_value=mock_smtp)
