"""
Logging configuration for breeze_balance.

Uses loguru like every other module in the package.
"""

import sys
from typing import Optional

from loguru import logger

from breeze_balance.config import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None) -> int:
    """Replace loguru's default handler with a single stderr sink.

    Should be called once by the host application at startup. Returns the id
    of the added handler.
    """
    logger.remove()
    return logger.add(
        sys.stderr,
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        colorize=True,
    )
