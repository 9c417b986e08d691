"""
Logging configuration.

Library modules only create loggers (``logging.getLogger(__name__)``);
applications call :func:`setup_logging` once at startup to attach handlers.
"""

import logging
import logging.config
import os
import sys
from typing import Any, Dict

LOGGER_NAME = "punks_remaster"


def get_log_level() -> str:
    """Get the log level from environment variables."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_logging_config() -> Dict[str, Any]:
    """
    Get the logging configuration dictionary.

    Returns a configuration usable with ``logging.config.dictConfig()``:
    regular output goes to stdout, errors additionally to stderr with the
    originating function and line.
    """
    log_level = get_log_level()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "default",
                "stream": sys.stdout,
            },
            "error_console": {
                "class": "logging.StreamHandler",
                "level": "ERROR",
                "formatter": "detailed",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "level": log_level,
                "handlers": ["console", "error_console"],
                "propagate": False,
            },
            "PIL": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console", "error_console"],
        },
    }


def setup_logging() -> None:
    """
    Configure logging for the application.

    Call once at startup, before any other logging occurs.
    """
    logging.config.dictConfig(get_logging_config())
    logging.getLogger(f"{LOGGER_NAME}.logging").debug(
        "Logging configured at level %s", get_log_level()
    )
