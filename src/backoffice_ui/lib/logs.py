"""
Logging utilities for the back office dashboard.

Every module logs through a child of the ``backoffice_ui`` logger. The
stream handler and the ``LOG_LEVEL`` threshold live on that parent only,
so Reflex's hot reload re-importing a module never stacks handlers.
"""

import logging
import os
from pathlib import Path

ROOT_NAME = "backoffice_ui"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the logger of a module.

    Callers pass ``__file__``; the path is reduced to the module stem so log
    lines read ``backoffice_ui.resource_service_impl``.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Child logger of the ``backoffice_ui`` logger.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    return _root().getChild(name)
