# sustainhub/core/log_config.py
import logging
import os
from logging.handlers import RotatingFileHandler

from sustainhub.core.config import settings

FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


def setup_logging() -> logging.Logger:
    logger = logging.getLogger("sustainhub")
    logger.setLevel(settings.LOG_LEVEL.upper())
    if logger.handlers:
        return logger

    formatter = logging.Formatter(FORMAT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(settings.LOG_DIR, "api.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
