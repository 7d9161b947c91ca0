"""Logging setup for fieldpart processes."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO


def configure_logging(
    *,
    level: int | str = logging.INFO,
    log_path: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``fieldpart`` logger hierarchy.

    Safe to call repeatedly: one console handler is kept and pointed at
    ``stream`` (stdout by default), file handlers are added once per path.
    """

    logger = logging.getLogger("fieldpart")
    logger.setLevel(level)

    console = next(
        (h for h in logger.handlers if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)),
        None,
    )
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if console is None:
        stream_handler = logging.StreamHandler(stream=stream or sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    elif stream is not None:
        console.setStream(stream)

    if log_path and str(Path(log_path).resolve()) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
