"""
SummaNote - Logging Utilities
"""

import logging
import sys

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at DEBUG level
_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "urllib3")


def _resolve_level() -> int:
    """Explicit LOG_LEVEL wins; otherwise DEBUG in dev, INFO elsewhere."""
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL.upper())
    if settings.SUMMANOTE_ENV == "dev":
        return logging.DEBUG
    return logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_resolve_level())

    return logger


def quiet_third_party_loggers() -> None:
    """Raise HTTP/SDK client loggers to WARNING so request bodies stay out of dev logs."""
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
