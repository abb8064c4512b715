"""Logger helpers for latencyviz.

Modules take a logger with get_logger(__name__) and leave handlers alone;
the package logger carries only a NullHandler until something calls
configure_logging(). Report scripts call it to see boundary, density and
report-build messages on stderr; host applications skip it and let their
own root configuration pick up the "latencyviz.*" records.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "LATENCYVIZ_LOG_LEVEL"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """Attach a stderr handler to the "latencyviz" logger (root is untouched).

    Args:
        level: Level name or number. None reads LATENCYVIZ_LOG_LEVEL, falling
            back to INFO; unknown names also fall back to INFO.
        fmt: Record format, DEFAULT_FMT when None.
        datefmt: Timestamp format, DEFAULT_DATEFMT when None.
        force: Replace existing handlers. Without it, a second call is a
            no-op once a stderr handler is attached.
    """
    level = _resolve_level(level)
    logger = logging.getLogger("latencyviz")
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    elif _has_stderr_handler(logger):
        return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(console)


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.INFO)
    return level


def _has_stderr_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
        for h in logger.handlers
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Named logger; the package logger "latencyviz" when name is None."""
    if name is None:
        name = "latencyviz"
    return logging.getLogger(name)
