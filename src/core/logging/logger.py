import logging
import sys

from core.config.settings import settings

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Module logger. The root handler is configured on first use.
    """
    global _configured
    if not _configured:
        logging.basicConfig(
            level=settings.LOG_LEVEL.upper(),
            format=_LOG_FORMAT,
            stream=sys.stdout,
        )
        _configured = True
    return logging.getLogger(name)
