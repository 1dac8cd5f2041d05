"""Diagnostic logging on stderr; stdout is reserved for rendered text."""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping


_LOGGER_NAME = "huecat"
LOG_LEVEL_ENV = "HUECAT_LOG_LEVEL"


def _level_from_env(environ: Mapping[str, str]) -> int | None:
    name = environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return None
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def configure_logging(verbose: bool = False, environ: Mapping[str, str] | None = None) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    environ = os.environ if environ is None else environ

    if verbose:
        level = logging.DEBUG
    else:
        level = _level_from_env(environ) or logging.WARNING
    logger.setLevel(level)

    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    logger.debug("logging configured")
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
