"""Logging helpers for slimorm."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

ROOT_LOGGER = "slimorm"


def configure_logging(level: int | str = logging.WARNING) -> None:
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


@contextmanager
def log_duration(label: str, logger: logging.Logger, *, threshold_ms: float = 50.0) -> Iterator[None]:
    """
    Log how long the wrapped block took; slow blocks are logged as warnings.
    """
    start = time.monotonic()
    try:
        yield
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
        logger.log(level, "%s took %.2fms", label, elapsed_ms, extra={"elapsed_ms": elapsed_ms})
