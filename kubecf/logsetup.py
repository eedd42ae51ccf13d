"""Logger configuration driven by the LOG_LEVEL environment variable."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

LOGGER_NAME = "kubecf"
TRACE = 5

_LEVELS = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


def parse_level(name: str) -> int:
    """Map a level name (case-insensitive) to a logging level; ValueError if unknown."""
    try:
        return _LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"not a valid log level: {name!r}") from None


def configure_logger(environ: Mapping[str, str] | None = None) -> logging.Logger:
    """Return the package logger, writing to stderr at the level from LOG_LEVEL.

    Unknown or missing levels fall back to WARNING.
    """
    env = os.environ if environ is None else environ
    try:
        level = parse_level(env.get("LOG_LEVEL", ""))
    except ValueError:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_kubecf", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter('time="%(asctime)s" level=%(levelname)s msg="%(message)s"')
        )
        handler._kubecf = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger