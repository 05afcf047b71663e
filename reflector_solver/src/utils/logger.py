"""Logging wrapper for solver modules with optional file output."""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(path)
        for h in logger.handlers
    )


def get_logger(
    name: str, file_path: str | None = None, level: int = logging.INFO
) -> logging.Logger:
    """Return configured logger, attaching a ``file_path`` handler if provided.

    Stream output goes to stderr so stdout carries only the puzzle answer.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter(LOG_FORMAT)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path:
        path = Path(file_path)
        if not _has_file_handler(logger, path):
            path.parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel(level)
    return logger
