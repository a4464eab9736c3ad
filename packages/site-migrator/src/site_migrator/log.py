"""Logging setup for the CLI and embedding services."""

from __future__ import annotations

import json
import logging
import time

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_TEXT_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


class StructuredFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "info", fmt: str = "text") -> logging.Logger:
    """Attach a single stream handler to the ``site_migrator`` logger."""
    logger = logging.getLogger("site_migrator")
    logger.setLevel(_LEVELS.get(level.lower(), logging.INFO))
    for h in logger.handlers[:]:
        logger.removeHandler(h)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    return logger
