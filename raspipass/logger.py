"""Logging setup for the configuration page."""
import logging

from .config import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the package logger.

    Args:
        config: Logging configuration.

    Returns:
        The ``raspipass`` logger.
    """
    logger = logging.getLogger("raspipass")
    logger.setLevel(getattr(logging, config.log_level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
