import logging
import os
from logging.handlers import RotatingFileHandler

from app.platform.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

log_dir = os.path.join(os.getcwd(), settings.LOG_DIR)
os.makedirs(log_dir, exist_ok=True)
log_file_path = os.path.join(log_dir, "contact_api.log")


def get_logger(name: str):
    """
    Logger for ``name`` writing to the console and to ``LOG_DIR/contact_api.log``.

    Handlers are attached once per name, so repeated calls are cheap.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = logging.DEBUG if settings.DEBUG else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    for handler in (
        RotatingFileHandler(log_file_path, maxBytes=10_000_000, backupCount=5),
        logging.StreamHandler(),
    ):
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger
