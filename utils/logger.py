# utils/logger.py
"""Logging setup shared by the app, the engine boundary and the fetchers."""

import logging

from .config import get_setting

ROOT_LOGGER = "lace"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False


def _configure_root() -> None:
    global _configured
    root = logging.getLogger(ROOT_LOGGER)
    level = str(get_setting("log_level", "INFO")).upper()
    root.setLevel(getattr(logging, level, logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the ``lace.<name>`` logger, configuring the root on first use."""
    if not _configured:
        _configure_root()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
