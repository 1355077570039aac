"""
Logging Setup

Applies a LoggingConfig to the ``iaxscore`` logger hierarchy. Library
modules only create loggers with ``logging.getLogger(__name__)``; handlers
are installed here, once, by the application.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .configuration import LoggingConfig

ROOT_LOGGER_NAME = "iaxscore"

_HANDLER_MARKER = "_iaxscore_handler"


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the package logger from a LoggingConfig.

    Calling it again replaces the handlers installed by a previous call.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(config.level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.format)

    if config.file_path:
        handler: logging.Handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)

    return logger


__all__ = ["configure_logging", "ROOT_LOGGER_NAME"]
