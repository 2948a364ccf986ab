"""
logging_config.py

root logger setup for applications embedding the store.
the library itself only logs through module loggers and never calls this.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from . import settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(log_file: str | None) -> list[logging.Handler]:
    out: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        out.append(
            RotatingFileHandler(
                log_file,
                maxBytes=settings.LOG_MAX_BYTES,
                backupCount=settings.LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    return out


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    configure the root logger once; a no-op when the host already attached handlers.
    """
    logging.captureWarnings(True)
    if logging.getLogger().handlers:
        return

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=_handlers(log_file or settings.LOG_FILE_PATH),
    )
