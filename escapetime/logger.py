import logging
import sys

from escapetime import config


_FORMAT = '== ESCAPETIME [%(relativeCreated)d] %(levelname)5s -- %(message)s'


def _make_handler(level_name):
    # an explicit level means the user wants to see the messages
    if not level_name:
        return logging.NullHandler()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT))
    return handler


def make_logger():
    """
    Return the "escapetime" logger.

    Unless the application already attached handlers to it (or to one of
    its ancestors), the level comes from ESCAPETIME_LOG_LEVEL and messages
    go to stderr; without a level the logger stays silent.
    """
    logger = logging.getLogger('escapetime')
    if logger.hasHandlers():
        return logger
    # LOG_LEVEL is already validated by config._parse_log_level
    level_name = config.LOG_LEVEL
    logger.setLevel(getattr(logging, level_name or 'CRITICAL'))
    logger.addHandler(_make_handler(level_name))
    return logger
