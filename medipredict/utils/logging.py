"""Structured logging helpers."""

from __future__ import annotations

import logging
import sys

from medipredict.config import LOG_LEVEL

# httpx logs every request at INFO; keep it out of the session log.
_NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def _level() -> int:
    return getattr(logging, LOG_LEVEL.upper(), logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Return a consistently-configured logger for *name*.

    Streamlit re-executes the page script on every interaction, so the
    handler is attached only once per logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)-8s %(name)s — %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(_level())
    return logger


def quiet_transport_logs(level: int = logging.WARNING) -> None:
    """Raise the threshold of the HTTP client loggers to *level*."""
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)
