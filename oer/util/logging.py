"""Standard library logging, routed through Logfire."""

import logging
import sys

import logfire

from oer.config import Settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send ``logging`` records to stdout and to Logfire.

    Call after ``configure_logfire`` so the Logfire handler has somewhere
    to export to.
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout), logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("oer").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a module logger, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
