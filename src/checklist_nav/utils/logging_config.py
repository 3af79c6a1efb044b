"""Logging setup shared by the library and the HTTP service."""

from __future__ import annotations

import logging
import sys

from checklist_nav.config import CHECKLIST_NAV_LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_HANDLER_NAME = "checklist_nav"


def _is_configured(root: logging.Logger) -> bool:
    return any(handler.get_name() == _HANDLER_NAME for handler in root.handlers)


def configure_logging(level: str | int | None = None) -> None:
    """Install a single stream handler on the root logger.

    Repeated calls never add a second handler; they only update the level
    when one is given.

    Args:
        level: Log level name or number. Defaults to ``CHECKLIST_NAV_LOG_LEVEL``
            on first configuration.
    """
    root = logging.getLogger()
    if _is_configured(root):
        if level is not None:
            root.setLevel(level)
        return

    root.setLevel(level if level is not None else CHECKLIST_NAV_LOG_LEVEL)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)

    # uvicorn ships its own handlers; route them through ours instead.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
