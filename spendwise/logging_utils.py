"""Mini README: Application-wide logging helpers for Spendwise.

Structure:
    * configure_root_logger - one-time root logger setup accepting names or levels.
    * get_logger - factory returning module loggers backed by that setup.

Usage:
    Ledger, storage, export and interface modules call ``get_logger(__name__)``
    at import time, which installs the handler at INFO. The CLI then calls
    ``configure_root_logger`` with the configured level; repeated calls only
    change the level, so handlers are never attached twice.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False
_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    """Translate textual level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach a timestamped stream handler to the root logger exactly once.

    Later calls only adjust the level.
    """

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        logging.getLogger().setLevel(_resolve_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
