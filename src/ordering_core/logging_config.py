"""Logging setup for hosts embedding ordering-core."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_installed_handler: logging.Handler | None = None


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger.

    Repeated calls replace the handler installed by the previous call.
    Handlers attached by the host are left in place.
    """
    global _installed_handler

    package_logger = logging.getLogger("ordering_core")
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)

    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    _installed_handler = handler
    return package_logger
