import logging
from config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logger(name: str = "vip") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if LOG_FILE:
        handler: logging.Handler = logging.FileHandler(LOG_FILE)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(LOG_LEVEL)
    return logger


app_logger = setup_logger()
