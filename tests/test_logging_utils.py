import logging

import pytest

from powerset.logging_utils import parse_level, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level("WARNING") == logging.WARNING
    assert parse_level(15) == 15
    with pytest.raises(ValueError):
        parse_level("loud")


def test_setup_logging_writes_file(root_logger, tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    setup_logging(console_level=logging.ERROR, file_path=log_file)
    assert len(root_logger.handlers) == 2
    logging.getLogger("powerset.test").debug("walk started")
    for handler in root_logger.handlers:
        handler.flush()
    assert "DEBUG - powerset.test - walk started" in log_file.read_text(encoding="utf-8")
