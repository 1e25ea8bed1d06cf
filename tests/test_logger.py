import logging

from raspipass.config import LoggingConfig
from raspipass.logger import setup_logging


def test_setup_logging_sets_level_once():
    logger = setup_logging(LoggingConfig(log_level="debug"))
    try:
        assert logger.name == "raspipass"
        assert logger.level == logging.DEBUG
        handlers = list(logger.handlers)
        assert setup_logging(LoggingConfig(log_level="WARNING")).handlers == handlers
        assert logger.level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
