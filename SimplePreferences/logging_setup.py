"""Logging configuration for the command line entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def ensure_logging(
    level: str | int = logging.WARNING,
    log_path: Optional[Path] = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.raiseExceptions = False
    formatter = logging.Formatter(fmt, datefmt="%H:%M:%S")
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_path is not None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
        except OSError as exc:
            root_logger.warning("Can't open log file %s: %s", log_path, exc)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    root_logger.setLevel(min(level, logging.DEBUG) if log_path is not None else level)
    root_logger.debug("SimplePreferences logging initialized")
