"""Stdlib logging setup for uvicorn and library loggers.

Application events go through logfire. This only decides the level and line
format of whatever still writes to the ``logging`` module.
"""

import logging
import sys

from quotevote.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty at INFO; kept at WARNING regardless of debug
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg")


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("quotevote").debug(
        "stdlib logging at %s (%s)", logging.getLevelName(level), settings.environment
    )
