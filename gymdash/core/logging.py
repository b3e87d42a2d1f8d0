from __future__ import annotations

import logging
from logging import Logger

from .config import Settings, get_settings


# Libraries that log every HTTP request at INFO
_CHATTY_LOGGERS = ("httpx", "httpcore", "aiogram.event")


def configure_logging(settings: Settings | None = None) -> Logger:
    """
    Configure root logger for the application and return the `gymdash` logger.

    DEBUG everywhere in the local environment; elsewhere INFO, with
    per-request HTTP logging turned down to warnings.
    """

    settings = settings or get_settings()

    log_level = logging.DEBUG if settings.is_debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    library_level = logging.DEBUG if settings.is_debug else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    logger = logging.getLogger("gymdash")
    logger.setLevel(log_level)
    return logger
