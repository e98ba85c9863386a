"""Mini README: Interactive interfaces for Atlas.

Exports the FastAPI application factory behind the browser-based planner.
"""

from .web_app import create_application

__all__ = ["create_application"]
