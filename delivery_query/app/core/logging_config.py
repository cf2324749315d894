"""
Logging setup for applications embedding the query helper.

The helper modules only emit debug messages through loggers named
after the ``delivery_query`` package and never configure logging on
import.  An application calls ``setup_logging()`` once at startup;
without arguments the level and optional log file come from
``settings`` (``LOG_LEVEL`` and ``LOG_FILE``).
"""

import logging
from pathlib import Path
from typing import List, Optional

from delivery_query.app.core import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # getLevelName returns a "Level X" string for unknown names.
    return level if isinstance(level, int) else logging.INFO


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger for the query helper.

    Parameters
    ----------
    level : Optional[str]
        Level name, case insensitive.  Defaults to ``settings.log_level``;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Extra UTF‑8 log file.  Defaults to ``settings.log_file``; an empty
        value means console output only.

    Does nothing when the root logger already has handlers, so an
    application's own configuration always wins.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    settings = config.settings
    if level is None:
        level = settings.log_level
    if logfile is None:
        logfile = settings.log_file or None

    root.setLevel(_level_from_name(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging configured at %s%s", logging.getLevelName(root.level), f", file {logfile}" if logfile else ""
    )
