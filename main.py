"""HTTP Entry Point - Root Module.

This is the root-level entry point for WSGI servers (e.g. `flask --app main run`).
It imports from the quakemap package.
"""

from quakemap.main import (
    app,
    earthquake_map,
)

__all__ = [
    "app",
    "earthquake_map",
]
