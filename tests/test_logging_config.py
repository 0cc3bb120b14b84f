from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import logging_config  # noqa: E402


@pytest.fixture()
def root_logger():
    """Restore the root logger's level and handlers after each test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    for h in handlers:
        if h.get_name() in (logging_config.CONSOLE_HANDLER, logging_config.FILE_HANDLER):
            root.removeHandler(h)
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


def _ours(root):
    names = (logging_config.CONSOLE_HANDLER, logging_config.FILE_HANDLER)
    return [h for h in root.handlers if h.get_name() in names]


def test_level_is_applied_on_every_call(root_logger):
    logging_config.setup_logging("DEBUG")
    assert root_logger.level == logging.DEBUG
    logging_config.setup_logging("warning")
    assert root_logger.level == logging.WARNING
    assert len(_ours(root_logger)) == 1


def test_unknown_level_falls_back_to_info(root_logger):
    logging_config.setup_logging("chatty")
    assert root_logger.level == logging.INFO


def test_file_handler_writes_log_lines(root_logger, tmp_path):
    logfile = tmp_path / "logs" / "api.log"
    logging_config.setup_logging("INFO", str(logfile))
    logging.getLogger("api.test").info("hello file")
    for h in _ours(root_logger):
        h.flush()
    text = logfile.read_text(encoding="utf-8")
    assert "[INFO] api.test: hello file" in text
