"""Mini README: Application-wide logging helpers for Atlas.

Structure:
    * get_logger - factory returning module loggers with baseline config.
    * configure_root_logger - installs the root handler once and applies
      the requested level.

Usage:
    Modules import ``get_logger`` at import time, which installs the handler
    at INFO. Entry points then call ``configure_root_logger`` with the
    configured level. The handler is added exactly once per process so
    reloading modules under uvicorn's reloader does not stack duplicates.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the formatter once; apply ``level`` whenever one is given."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()

    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)
        _LOGGER_INITIALISED = True

    if level is not None:
        root_logger.setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
