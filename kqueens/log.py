"""Loguru sink setup shared by the CLI and the session."""

import sys
from typing import Optional

from loguru import logger

from kqueens.config import CONFIG

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {message}"


def setup_logging(level: Optional[str] = None) -> int:
    """Replace loguru's default sink with a stderr sink at the configured level.

    Returns the id of the new sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or CONFIG.log_level).upper(), format=LOG_FORMAT)
