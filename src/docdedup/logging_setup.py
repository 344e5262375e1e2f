"""Logging configuration."""

import logging
import logging.config


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Install a console handler on the root logger."""
    loglevel = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(loglevel, int):
        loglevel = logging.INFO

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "level": loglevel,
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": loglevel,
            },
        }
    )

    # psycopg pool chatter only in debug
    logging.getLogger("psycopg.pool").setLevel(logging.DEBUG if debug else logging.WARNING)
