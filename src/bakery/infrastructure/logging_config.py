"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from bakery.infrastructure.config import Settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    root = logging.getLogger("bakery")
    root.setLevel(settings.log_level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        root.addHandler(stream)

    if settings.log_file is not None and not any(
        isinstance(h, RotatingFileHandler) for h in root.handlers
    ):
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            settings.log_file, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
