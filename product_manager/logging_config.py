"""Logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger. Modules log through
``logging.getLogger(__name__)``. Calling it again is a no-op, which
keeps repeated app startups in tests from stacking handlers.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"). Case insensitive.
            Unknown names fall back to INFO.
        logfile: Optional path to a file to log messages to.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
