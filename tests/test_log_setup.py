from __future__ import annotations

import logging

import pytest

from src.config import LoggingConfig
from src.log_setup import LOG_FILENAME, configure_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_configure_logging_writes_file(tmp_path, restore_root_logger) -> None:
    log_dir = tmp_path / "logs"

    path = configure_logging(LoggingConfig(level="debug", log_dir=str(log_dir)))
    logging.getLogger("src.test").debug("hello_log")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert path == log_dir / LOG_FILENAME
    assert "hello_log" in path.read_text(encoding="utf-8")


def test_configure_logging_unknown_level(tmp_path, restore_root_logger) -> None:
    with pytest.raises(ValueError):
        configure_logging(LoggingConfig(level="LOUD", log_dir=str(tmp_path)))
