import logging
from logging import Logger


"""
Logger setup for ShelfPrint.
Import `logger` anywhere; child modules take `logger.getChild(__name__)`-style
children so a single handler covers the whole package.

author: Cole McGregor
date: 2026-03-02
version: 0.1.0
"""

# LOGGER_NAME is used to identify the logger.
LOGGER_NAME = "shelfprint"

logger: Logger = logging.getLogger(LOGGER_NAME)  # import this anywhere

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str) -> Logger:
    """
    Return a child of the package logger, e.g. get_logger("pipeline")
    -> "shelfprint.pipeline".
    """
    return logger.getChild(name)


def setup(level: str = "INFO") -> None:
    """
    Setup the logger.
    """
    if logger.handlers:
        logger.setLevel(level.upper())
        return  # already configured
    logger.setLevel(level.upper())

    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(h)

    # child loggers (shelfprint.*) propagate to this handler only
    logger.propagate = False
