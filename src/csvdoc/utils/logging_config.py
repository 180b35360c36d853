"""Logging setup shared by the library, the CLI and the API server."""

from __future__ import annotations

import logging

from csvdoc.config import CSVDOC_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Configure the root logger for an entry point (CLI or API server).

    The library itself never installs handlers. Calling this again only
    updates the level.

    Args:
        level: Logging level name or number. Defaults to ``CSVDOC_LOG_LEVEL``.

    Returns:
        The root logger.
    """
    resolved = level or CSVDOC_LOG_LEVEL
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(resolved)
    return root
