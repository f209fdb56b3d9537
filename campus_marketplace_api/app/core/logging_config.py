"""
Logging setup for the API process.

``setup_logging`` attaches console (and optionally file) handlers to
the root logger and brings uvicorn's own loggers in line with the
configured level, so server and application records share one format
and one threshold.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(config: Settings) -> int:
    """DEBUG when ``config.debug`` is set, otherwise ``config.log_level``."""
    if config.debug:
        return logging.DEBUG
    return getattr(logging, config.log_level.upper(), logging.INFO)


def setup_logging(config: Settings) -> None:
    """Configure the root logger and uvicorn loggers from ``config``.

    Handlers are attached to the root logger only once; calling this
    again (tests, repeated ``create_app``) only re-applies the level.
    uvicorn's loggers drop their own handlers and propagate to the
    root so every record goes through the same handlers.
    """
    level = resolve_level(config)
    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if config.log_file:
            file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(level)
        server_logger.propagate = True
