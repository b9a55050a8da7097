"""
Logging setup for the Tourism API.

``setup_logging`` attaches this application's handlers to the root
logger: one on stderr and, when ``LOG_FILE`` is set, one writing to
that file.  Handlers are named, so calling the function again (every
``create_app`` does) only adjusts the level and never duplicates
output.  Handlers installed by others, such as uvicorn or pytest, are
left alone.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "tourism_api.console"
FILE_HANDLER_NAME = "tourism_api.file"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give ``INFO``."""
    value = getattr(logging, level.strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _find_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def _install(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the root logger and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        File to append log records to.  Missing parent directories are
        created.  The file handler is only installed once per process;
        a later call with a different path keeps the first file.
    """
    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    if _find_handler(root, CONSOLE_HANDLER_NAME) is None:
        _install(root, logging.StreamHandler(), CONSOLE_HANDLER_NAME)

    if logfile and _find_handler(root, FILE_HANDLER_NAME) is None:
        log_path = Path(logfile).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _install(root, logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER_NAME)

    return root
