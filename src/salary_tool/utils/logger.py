"""
Logger factory for the salary tool.

Every salary_tool logger writes to stdout at the level configured by
SALARY_LOG_LEVEL unless the caller asks for a specific one.
"""
import logging
import sys
from typing import Optional, Union

from ..config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(name)s:%(lineno)d | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a stdout logger set to `level` or the configured log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        # Own handler already prints; avoid a second copy via root
        logger.propagate = False
    logger.setLevel(level if level is not None else get_settings().log_level)
    return logger
