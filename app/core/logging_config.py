"""Logging configuration for the API process."""

import logging
import logging.config
from typing import Any

_logging_configured = False


def _build_logging_config(level: str) -> dict[str, Any]:
    """Build the dictConfig configuration dictionary."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "app": {"level": level, "handlers": ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the ``app`` package.

    Safe to call more than once; only the first call takes effect.

    Args:
        level: Level name for the ``app`` logger hierarchy (e.g. "DEBUG")
    """
    global _logging_configured

    if _logging_configured:
        return

    logging.config.dictConfig(_build_logging_config(level.upper()))
    _logging_configured = True
