import logging

import pytest

from tourism_api.app.core.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def _names(logger):
    return [h.get_name() for h in logger.handlers]


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level("chatty") == logging.INFO


def test_repeated_setup_keeps_one_console_handler(root_logger):
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert _names(root_logger).count(CONSOLE_HANDLER_NAME) == 1
    assert root_logger.level == logging.DEBUG


def test_foreign_handlers_are_kept(root_logger):
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)
    setup_logging("INFO")
    assert foreign in root_logger.handlers
    assert CONSOLE_HANDLER_NAME in _names(root_logger)


def test_logfile_is_created_and_written(root_logger, tmp_path):
    logfile = tmp_path / "logs" / "api.log"
    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    assert _names(root_logger).count(FILE_HANDLER_NAME) == 1

    logging.getLogger("tourism_api.test").info("seeded %d destinations", 3)
    for handler in root_logger.handlers:
        handler.flush()
    content = logfile.read_text(encoding="utf-8")
    assert "[INFO] tourism_api.test: seeded 3 destinations" in content
