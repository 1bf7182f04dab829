"""Package-wide logger."""
import logging
import sys
from typing import Union


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_evaluator")


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger and set its level.

    Calling it again only updates the level.

    :param level: Logging level name or number

    :return: The configured package logger
    :rtype: logging.Logger
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    # Results go to stdout, keep log records off the root handlers
    logger.propagate = False
    return logger
