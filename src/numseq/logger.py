"""Logger for numseq.

The level comes from the ``NUMSEQ_LOG_LEVEL`` environment variable, then
``LOG_LEVEL``, and falls back to WARNING so that importing the library is
quiet by default.
"""

import logging
import os
import sys

__all__ = ["DEFAULT_LEVEL", "logger", "resolve_level", "setup_logger"]

DEFAULT_LEVEL = logging.WARNING

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str | int | None) -> int:
    """
    Map a level name or number to a logging level.

    Unknown names resolve to DEFAULT_LEVEL instead of failing at import.
    """
    if level is None or level == "":
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def setup_logger(name: str = "numseq", level: str | int | None = None) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler on first use.

    Args:
        name: Logger name
        level: Level name or number; read from the environment when None
    """
    if level is None:
        level = os.getenv("NUMSEQ_LOG_LEVEL") or os.getenv("LOG_LEVEL")

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(resolve_level(level))

    return logger


logger = setup_logger()
