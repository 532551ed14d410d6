"""
Logging configuration for bignum.

The library itself only emits DEBUG records; applications and the
validation tools call ``setup_logging`` to route them to stdout.
"""

import logging
import sys
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL: Final[int] = logging.INFO
ROOT_LOGGER_NAME: Final[str] = "bignum"


def setup_logging(level: int = DEFAULT_LEVEL) -> logging.Logger:
    """
    Configure the ``bignum`` logger with a single stdout handler.

    Calling this again replaces the handler instead of stacking a second one.

    Args:
        level: The logging level to use (default: INFO).

    Returns:
        The ``bignum`` logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # Keep records out of the process-wide root logger
    root_logger.propagate = False
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``bignum`` namespace.

    Args:
        name: Short module name, e.g. ``"textio"``.

    Returns:
        The ``bignum.<name>`` logger.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
