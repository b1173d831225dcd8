"""Logging configuration for the command line tools.

The library modules only create loggers; handlers are installed here, once.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any


def _dict_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "xmltest": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: str = "WARNING") -> None:
    """Configure the ``xmltest`` logger once.

    If it already has handlers, only the level is updated so repeated CLI
    invocations in one process do not duplicate output.
    """
    logger = logging.getLogger("xmltest")
    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return
    dictConfig(_dict_config(level))
