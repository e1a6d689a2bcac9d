"""Logging configuration."""
import logging
import sys
from registrar.core.config import settings

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = None):
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format=settings.LOG_FORMAT or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
