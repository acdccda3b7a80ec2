"""Pipeline - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data from the feed, through the
pure marker-building core, into the rendered map. It's the "glue"
that makes the application work.
"""

import logging
from dataclasses import dataclass
from typing import Any

import folium

from quakemap.core.config import MapConfig
from quakemap.core.earthquake import EarthquakeRecord, records_from_geojson
from quakemap.core.markers import Marker, build_markers
from quakemap.shell.map_renderer import build_marker_layer, create_map
from quakemap.shell.usgs_client import USGSFeedClient


logger = logging.getLogger(__name__)


@dataclass
class MapBuildResult:
    """Result of one fetch-and-render run.

    Attributes:
        map: The composed folium map
        records: Earthquake records read from the feed
        markers: Marker descriptors, one per record
    """
    map: folium.Map
    records: list[EarthquakeRecord]
    markers: list[Marker]

    @property
    def record_count(self) -> int:
        """Number of earthquakes placed on the map."""
        return len(self.records)

    @property
    def summary(self) -> str:
        """Human-readable summary of the run."""
        return f"Rendered {len(self.markers)} earthquake markers"


def build_earthquake_map(
    config: MapConfig,
    client: USGSFeedClient | None = None,
    geojson: dict[str, Any] | None = None,
) -> MapBuildResult:
    """Fetch the feed and compose the earthquake map.

    The fetch is the only I/O and is not retried; any error it raises
    propagates to the caller and no map is built.

    Args:
        config: Map configuration
        client: Feed client (defaults to one built from config)
        geojson: Pre-loaded feed document; skips the fetch when given

    Returns:
        MapBuildResult with the map and the intermediate records/markers
    """
    if geojson is None:
        if client is None:
            client = USGSFeedClient(config.feed_url, timeout=config.request_timeout)
        geojson = client.fetch_feed()

    records = records_from_geojson(geojson)
    markers = build_markers(records)

    logger.info("Built %d markers from %d records", len(markers), len(records))

    layer = build_marker_layer(markers, name=config.layer_name)
    fmap = create_map(layer, config)

    return MapBuildResult(map=fmap, records=records, markers=markers)
