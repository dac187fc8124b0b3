# What it does: Configures the diagnostic log stream (loguru). Command output itself is printed, not logged
# How it does: Replaces loguru's default handler with a single stderr sink whose level comes from SPRIG_LOG_LEVEL, the repository config, or WARNING

import os
import sys

from loguru import logger

from .errors import InvalidConfig

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>"
ENV_LEVEL = 'SPRIG_LOG_LEVEL'
DEFAULT_LEVEL = 'WARNING'


def configure_logging(level=None):
    level = (os.environ.get(ENV_LEVEL) or level or DEFAULT_LEVEL).upper()
    logger.remove()
    try:
        logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    except ValueError:
        # Keep a usable sink before reporting the bad level
        logger.add(sys.stderr, format=LOG_FORMAT, level=DEFAULT_LEVEL)
        raise InvalidConfig(f"Unknown log level '{level}'.") from None
    return level
