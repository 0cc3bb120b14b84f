"""
Logging setup for the Artistes API.

Modules log through ``logging.getLogger(__name__)``; ``setup_logging``
attaches the application's handlers to the root logger once and applies
the configured level on every call, so the level from the settings of the
latest ``create_app`` wins.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_HANDLER = "artistes.console"
FILE_HANDLER = "artistes.file"


def _named_handler(handler: logging.Handler, name: str) -> logging.Handler:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers = [_named_handler(logging.StreamHandler(), CONSOLE_HANDLER)]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_named_handler(logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive; unknown names fall back
        to INFO. Applied on every call.
    logfile : Optional[str]
        Optional file to log to. Handlers are only attached on the
        first call; later calls leave them in place.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    installed = {h.get_name() for h in root.handlers}
    if CONSOLE_HANDLER not in installed:
        for handler in _build_handlers(logfile):
            root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
