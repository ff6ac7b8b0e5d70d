"""Logging configuration for the client.

Import `get_logger` to create loggers in other modules.
"""

import logging
import sys
from functools import lru_cache

from fbauth.config import get_settings


def configure_logging(level: int | None = None) -> None:
    """Configure logging for scripts and applications embedding the client.

    Library code never calls this; it is meant for entry points.

    Args:
        level: Log level. Defaults to DEBUG when ``Settings.debug`` is set,
            INFO otherwise.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("fbauth").setLevel(level)

    # Request URLs carry the API key as a query parameter
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@lru_cache(maxsize=None)
def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name.

    Args:
        name: The module name, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
