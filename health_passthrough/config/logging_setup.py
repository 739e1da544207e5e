"""Process logging configuration."""

from __future__ import annotations

import logging.config


def config_setup_logging(log_level: str = "INFO") -> None:
    """Configure root logging to stdout.

    Args:
        log_level: Root logging level name.

    Returns:
        None: Configures logging as side effect.

    Raises:
        ValueError: Raised when the level name is not recognized by logging.
    """

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                }
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {"level": log_level.upper(), "handlers": ["stdout"]},
            "loggers": {
                "uvicorn.access": {"level": "WARNING"},
            },
        }
    )
