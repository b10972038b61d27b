"""
Logging setup for the Users API.

Service modules log through ``logging.getLogger(__name__)``; this module
only decides where those records go.  ``create_app`` calls
``setup_logging`` with the configured level and optional log file
(``LOG_LEVEL`` / ``LOG_FILE``).  Once the root logger has handlers,
for example when uvicorn or pytest got there first or when the app
is created a second time, later calls change nothing.
"""

import logging
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stderr and, if ``logfile`` is given, to that file too.

    Parameters
    ----------
    level : str
        Root level name, case insensitive.
    logfile : Optional[str]
        File to append records to, resolved against the working
        directory.  Empty or ``None`` disables the file handler.
    """
    if logging.getLogger().handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
