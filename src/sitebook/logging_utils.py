"""Application-wide logging helpers.

Modules call ``get_logger(__name__)``; the CLI entry point calls
``configure_logging`` once with the requested level.
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SITEBOOK_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"

_handler: Optional[logging.StreamHandler] = None


def configure_logging(level: Optional[int | str] = None) -> None:
    """Configure the ``sitebook`` logger.

    Args:
        level: Logging level. If None, reads SITEBOOK_LOG_LEVEL, defaulting
            to WARNING. Calling again adjusts the level and points the
            handler at the current stderr.
    """
    global _handler

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger("sitebook")
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(_handler)
    else:
        _handler.setStream(sys.stderr)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger under the ``sitebook`` namespace."""
    if name is None or name == "sitebook" or name.startswith("sitebook."):
        return logging.getLogger(name or "sitebook")
    return logging.getLogger(f"sitebook.{name}")
