"""
Logging configuration for the backend.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  ``run.py`` starts uvicorn without its
own logging config, so the server's ``uvicorn.*`` loggers propagate
here and share the application's format.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "alumni-search"


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    The level is applied on every call; handlers are attached only once,
    so repeated ``create_app`` calls (as in the test suite) do not
    duplicate output.  ``logfile`` is created along with its directory.
    """
    root = logging.getLogger()
    root.setLevel(_level(level))
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
        root.addHandler(handler)
