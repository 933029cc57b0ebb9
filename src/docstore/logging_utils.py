"""Package logger setup"""

import logging

from docstore.config import Settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Set the package logger level and attach a stderr handler once."""
    logger = logging.getLogger(settings.app_name)
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
