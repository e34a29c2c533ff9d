# calculators/logging_config.py
import logging
from typing import Optional

from . import config

LOGGER_NAME = "calculators"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Safe to call more than once; the handler is only installed the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or config.LOG_LEVEL).upper())
    if not any(getattr(h, "_calculators_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._calculators_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
