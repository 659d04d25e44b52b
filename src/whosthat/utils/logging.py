"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``whosthat`` namespace.
    - Allow optional verbose/debug modes through :func:`configure_logging`.

Notes/Edge cases:
    - Configuration is idempotent; calling it twice never adds a second
      handler.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "whosthat"
_HANDLER_FLAG = "_whosthat_handler"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root logger.

    ``name`` may be a module ``__name__``; names outside the package namespace
    are nested under it.
    """

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int = "WARNING", *, verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger and set its level."""

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(getattr(h, _HANDLER_FLAG, False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_FLAG, True)
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else level)
    return root


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
