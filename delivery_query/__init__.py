"""
Top‑level package for the delivery query helper.

All functionality lives in submodules under ``app``.  The most common
entry point, :class:`QueryHelper`, is re‑exported here so callers can
write ``from delivery_query import QueryHelper``.
"""

from .app.services.query_helper import QueryHelper  # noqa: F401

__all__ = ["QueryHelper"]
