"""Logging configuration."""

import logging
import logging.handlers
from typing import List, Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handlers installed by configure_logging, replaced on every call
_installed_handlers: List[logging.Handler] = []


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Route log records to the console and, optionally, a rotating file.

    Calling this again replaces the handlers from the previous call, so
    repeated runs in one process never duplicate output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Log file path, or None for console only
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5
            )
        )

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

    root_logger.setLevel(log_level)
