import logging

from skyview.config import get_setting

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def app_logger(name: str) -> logging.Logger:
    """
    Return a module logger with a single stream handler attached.

    :param name: Logger name, usually ``__name__``.
    :return: Configured logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(str(get_setting("LOG_LEVEL", "INFO")).upper())
    return logger
