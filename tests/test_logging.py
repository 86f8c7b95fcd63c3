import logging

import pytest
from fastapi.testclient import TestClient

from emporium.core.logging_config import setup_logging
from emporium.main import app


@pytest.fixture
def root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_startup_logs_listening_line(caplog, root_level):
    with caplog.at_level(logging.INFO):
        with TestClient(app):
            pass
    assert "listening on port" in caplog.text


def test_setup_logging_sets_root_level(root_level):
    root_level.setLevel(logging.WARNING)
    setup_logging("INFO")
    assert root_level.level == logging.INFO
    assert logging.getLogger("emporium.api.users").isEnabledFor(logging.INFO)
