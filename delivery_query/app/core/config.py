"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
helper works out of the box; override them via environment variables
before importing this module.
"""

import os
from dataclasses import dataclass


def _get_int(name: str, fallback: int) -> int:
    raw_value = os.getenv(name)
    if not raw_value:
        return fallback
    try:
        return int(raw_value)
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw_value!r}")


@dataclass(frozen=True)
class Settings:
    """Settings loaded from environment variables."""

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, ``setup_logging`` only
    # attaches a console handler.
    log_file: str = os.getenv("LOG_FILE", "")

    # Page size used by ``QueryHelper.paging`` when the caller does not
    # pass ``count_on_page``.
    default_page_size: int = _get_int("DEFAULT_PAGE_SIZE", 100)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
