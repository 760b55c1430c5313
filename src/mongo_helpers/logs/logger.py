import logging

from ..config.settings import LOG_LEVEL


def setup_logger(name: str = "mongo_helpers", level: str = LOG_LEVEL):
    """Attach a console handler to the package logger. Meant for applications;
    the library modules only call logging.getLogger(__name__)."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
