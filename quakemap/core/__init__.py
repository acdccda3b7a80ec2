"""Functional Core - Pure functions with no side effects.

This module contains all map-building logic as pure functions:
- GeoJSON to earthquake record mapping
- Depth color lookup
- Marker building
- Legend content

All functions here are deterministic and have no I/O.
"""

from quakemap.core.earthquake import EarthquakeRecord, records_from_geojson
from quakemap.core.depth_scale import VIRIDIS, get_depth_color
from quakemap.core.markers import Marker, build_marker, build_markers
from quakemap.core.legend import LegendRow, get_legend_rows, format_legend_html
from quakemap.core.config import MapConfig, build_feed_url

__all__ = [
    # Records
    "EarthquakeRecord",
    "records_from_geojson",
    # Depth scale
    "VIRIDIS",
    "get_depth_color",
    # Markers
    "Marker",
    "build_marker",
    "build_markers",
    # Legend
    "LegendRow",
    "get_legend_rows",
    "format_legend_html",
    # Config
    "MapConfig",
    "build_feed_url",
]
