"""
Logging setup shared by the web app and the command line entry point.

Usage:
    from bookkeeper.logging_config import setup_logging
    setup_logging()
"""

import logging
import sys

from bookkeeper.config import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every statement or request at INFO
NOISY_LOGGERS = [
    "sqlalchemy.engine",
    "uvicorn.access",
    "httpx",
]


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the root logger with a single console handler.

    Calling it twice replaces the handler rather than stacking
    a second one.

    Args:
        level: Log level name. Defaults to Settings.LOG_LEVEL.

    Returns:
        The configured root logger.
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_bookkeeper", False):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    handler._bookkeeper = True
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
