# core/logger.py
import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "RAYHIT_LOG_LEVEL"
# Module loggers are logging.getLogger(__name__), so these are their parents
PACKAGE_LOGGERS = ("core", "geometry")

def init_logger(level=None) -> logging.Logger:
    """
    Configure logging for scripts and tests that drive the geometry code.
    The level comes from the argument, then RAYHIT_LOG_LEVEL, then WARNING,
    and is applied to the package loggers on every call.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(format=LOG_FORMAT)
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    return logging.getLogger("geometry")
