"""Logging helpers for lomofilter."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the package logger, attaching a stderr handler on first use."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("lomofilter")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    return _LOGGER


def set_level(level: str) -> None:
    """Apply a level name such as ``"DEBUG"`` from the config file."""

    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        logger.warning("Unknown log level %r, keeping %s", level, logging.getLevelName(logger.level))
        return
    logger.setLevel(value)


logger = get_logger()
