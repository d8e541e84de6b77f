from __future__ import annotations

import logging
from typing import Union

LOGGER_ID = "raymath"
LOG_FORMAT = "%(asctime)-24s|%(levelname)-9s|%(name)-20s|%(message)s"
raymath_logger = logging.getLogger(LOGGER_ID)
raymath_logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the child logger ``raymath.<name>``."""
    return logging.getLogger(f"{LOGGER_ID}.{name}")


def set_up_simple_logging(level: Union[int, str] = logging.INFO) -> logging.Handler:
    """
    Sends raymath log records to ``sys.stderr``.

    The library is silent by default; call this from an application to see
    generator seeding and other diagnostics.

    Args:
        level: log level, either a ``logging`` constant or its name.

    Returns:
        The attached handler, so the caller can remove it again.
    """
    sh = logging.StreamHandler()
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    raymath_logger.addHandler(sh)
    raymath_logger.setLevel(level)
    raymath_logger.debug("Started raymath logging.")
    return sh
