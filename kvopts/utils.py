# Kvopts Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler

from kvopts.logger import logger

LOG_MODE_ENV = "KVOPTS_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(mode: str | None = None, level: int = logging.WARNING) -> logging.Handler:
    """
    Attach a single console handler to the `kvopts` logger.

    The root logger is left alone so host applications keep their own logging
    configuration. Calling this again replaces the handler added before.

    Args:
        mode (str | None):
            - "cli": Rich console logs on stderr (default)
            - "json": one JSON object per record on stderr
            Falls back to the `KVOPTS_LOG_MODE` environment variable.
        level (int): Level for the `kvopts` logger. Defaults to `logging.WARNING`.

    Returns:
        logging.Handler: The handler that was attached.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or "cli"

    if mode == "cli":
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    logger.debug("Logging initialized in '%s' mode.", mode)
    return handler
