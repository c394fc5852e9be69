"""Logging setup for the timesheet package."""

from __future__ import annotations

import logging

_LOGGER_PREFIX = "timesheet_pay"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the timesheet_pay namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Set the package log level and, when the process root logger has no
    handlers yet, attach one stream handler.

    Records still propagate to the root logger so host handlers (and
    pytest's caplog) see them. Safe to call more than once; only the level
    is updated on later calls.
    """
    global _configured

    root = logging.getLogger(_LOGGER_PREFIX)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    if not _configured:
        if not logging.getLogger().handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            logging.getLogger().addHandler(handler)
        _configured = True
    return root
