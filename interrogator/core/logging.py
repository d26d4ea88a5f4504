"""Logging configuration with console and rotating file output."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from interrogator.core.config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAMES = ("interrogator-console", "interrogator-file")


def setup_logging(config: Optional[Settings] = None, log_to_file: bool = True) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once; handlers installed by a previous call are
    replaced rather than duplicated.
    """
    config = config or default_settings
    logger = logging.getLogger("interrogator")
    logger.setLevel(config.LOG_LEVEL)

    for handler in list(logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name("interrogator-console")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(config.LOG_DIRECTORY)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / f"{config.SERVICE_NAME}.log",
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.set_name("interrogator-file")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
