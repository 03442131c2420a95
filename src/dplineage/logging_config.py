"""Logging setup for applications embedding the lineage engine.

The library only creates module loggers; nothing is configured on import.
"""

from __future__ import annotations

import logging

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stream handler to the ``dplineage`` logger once.

    Args:
        level: Log level; defaults to ``LineageSettings.log_level``
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if level is None:
        from dplineage.config import get_settings

        level = get_settings().log_level

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("dplineage")
    logger.addHandler(handler)
    logger.setLevel(level)
    _CONFIGURED = True
