"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS feed client (HTTP, local files)
- Map rendering (folium, HTML output)
- Configuration loading (environment/files)

Keep this layer thin and simple. All map-building logic should be in core.
"""

from quakemap.shell.usgs_client import USGSFeedClient, load_geojson_file
from quakemap.shell.map_renderer import create_map, build_marker_layer, save_map
from quakemap.shell.config_loader import load_config, MapConfig

__all__ = [
    "USGSFeedClient",
    "load_geojson_file",
    "create_map",
    "build_marker_layer",
    "save_map",
    "load_config",
    "MapConfig",
]
