"""Route standard-library log records for image2asset through :mod:`loguru`."""
from __future__ import annotations

import inspect
import logging
from typing import Optional

from loguru import logger


class LoguruBridge(logging.Handler):
    """Forward :mod:`logging` records to loguru, keeping the caller's frame."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(verbose: bool = False) -> None:
    """Send progress lines to stdout; ``verbose`` adds the per-entry DEBUG lines.

    Safe to call repeatedly: the loguru sink and the root handlers are
    replaced on every call.
    """

    level = "DEBUG" if verbose else "INFO"
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=level, format="{message}")
    logging.basicConfig(handlers=[LoguruBridge()], level=level, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a standard-library logger tied to loguru."""

    return logging.getLogger(name or __name__)
