"""
Logging Setup
Routes loguru output to stderr so stdout carries only the result line
"""

import sys
from loguru import logger


def setup_logging(level: str = "INFO"):
    """Replace loguru's current sinks with a formatted stderr sink"""
    # unknown levels raise here, while the previous sink is still installed
    logger.level(level)

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )
