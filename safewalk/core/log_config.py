# File: safewalk/core/log_config.py

import logging

from safewalk.core.config.settings import settings

ROOT_LOGGER_NAME = "safewalk"
HANDLER_NAME = "safewalk.console"


def configure_logging(level: str = None) -> logging.Logger:
    """
    Applies a level and a stream handler to the 'safewalk' logger tree.
    Importing the library never touches logging; applications opt in here.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(h.name == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.name = HANDLER_NAME
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
