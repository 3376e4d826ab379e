"""
Logging setup for taskorder

Every module obtains its logger through get_logger(__name__). All loggers
live under the "taskorder" namespace so a single handler controls them.

Environment Variables:
  TASKORDER_LOG_LEVEL: Root level for the package (default WARNING)
"""

import logging
import os
import sys

ROOT_LOGGER_NAME = "taskorder"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that looks up sys.stderr on every emit."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv("TASKORDER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: str | int | None = None, force: bool = False) -> logging.Logger:
    """
    Install the package handler on the "taskorder" root logger.

    Args:
        level: Level name or number; falls back to TASKORDER_LOG_LEVEL
        force: Reconfigure even if logging was already set up

    Returns:
        The package root logger
    """
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured and not force:
        if level is not None:
            root.setLevel(_resolve_level(level))
        return root

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    _configured = True
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger in the taskorder namespace, configuring it on first use."""
    if not _configured:
        configure_logging()
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
