"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass

from quakemap.core.legend import DEFAULT_LEGEND_TITLE


# USGS real-time summary feeds
USGS_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

FEED_MAGNITUDES = ("significant", "4.5", "2.5", "1.0", "all")
FEED_PERIODS = ("hour", "day", "week", "month")

OSM_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a>'
    " contributors"
)


def build_feed_url(magnitude: str = "all", period: str = "week") -> str:
    """Build a USGS summary feed URL.

    Pure function.

    Args:
        magnitude: Magnitude threshold name (see FEED_MAGNITUDES)
        period: Time window name (see FEED_PERIODS)

    Returns:
        GeoJSON feed URL

    Raises:
        ValueError: If magnitude or period is not a known feed name
    """
    magnitude = str(magnitude)
    if magnitude not in FEED_MAGNITUDES:
        raise ValueError(
            f"Unknown feed magnitude {magnitude!r}, expected one of {FEED_MAGNITUDES}"
        )
    if period not in FEED_PERIODS:
        raise ValueError(
            f"Unknown feed period {period!r}, expected one of {FEED_PERIODS}"
        )
    return f"{USGS_FEED_BASE}/{magnitude}_{period}.geojson"


DEFAULT_FEED_URL = build_feed_url("all", "week")


@dataclass
class MapConfig:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_url: GeoJSON feed to fetch earthquakes from
        tile_url: Tile URL template for the base layer
        tile_attribution: Attribution HTML for the base layer
        center: Initial map center as (latitude, longitude)
        zoom: Initial zoom level
        layer_name: Name of the earthquake layer in the layer control
        legend_title: Heading of the depth legend
        legend_position: Screen corner the legend is anchored to
        output_path: Where the CLI writes the HTML page
        request_timeout: Fetch timeout in seconds (None waits forever)
    """
    feed_url: str = DEFAULT_FEED_URL
    tile_url: str = OSM_TILE_URL
    tile_attribution: str = OSM_ATTRIBUTION
    center: tuple[float, float] = (0.0, 0.0)
    zoom: int = 2
    layer_name: str = "Earthquakes"
    legend_title: str = DEFAULT_LEGEND_TITLE
    legend_position: str = "bottomright"
    output_path: str = "earthquake_map.html"
    request_timeout: float | None = None
