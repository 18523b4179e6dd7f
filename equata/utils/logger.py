"""Package logger.

Modules log through ``from ..utils.logger import logger``.
"""

import logging
import sys

from .config import Config


def setup_logger(name: str = "equata") -> logging.Logger:
    """Configure and return the package logger.

    Calling this again replaces the existing handler instead of stacking
    a second one.
    """
    log = logging.getLogger(name)
    log.setLevel(Config.get_log_level())

    if log.hasHandlers():
        log.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    log.addHandler(handler)
    return log


logger = setup_logger()
