"""Mini README: Core package initializer for the Atlas route planner.

This module exposes the logging helper and the package version. It stays
lightweight so that importing the package does not pull in the web
framework; the planning session lives in ``atlas.session``.
"""

from .logging_utils import get_logger

__version__ = "1.5.1"

__all__ = ["get_logger", "__version__"]
