"""Logging setup for the console.

Standard library logging configured through ``dictConfig``.  Log records go
to stderr so they never interleave with the menu's tables on stdout.
"""

from __future__ import annotations

import logging
import logging.config

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure the ``ims`` logger hierarchy.

    *level* is a level name such as ``"DEBUG"`` or ``"INFO"``; unknown
    names raise ValueError from ``dictConfig``.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": CONSOLE_FORMAT,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "stream": "ext://sys.stderr",
                    "level": level.upper(),
                }
            },
            "loggers": {
                "ims": {
                    "handlers": ["stderr"],
                    "level": level.upper(),
                }
            },
        }
    )


__all__ = ["configure_logging", "CONSOLE_FORMAT"]
