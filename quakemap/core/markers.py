"""Marker building - Pure functions.

This module turns EarthquakeRecords into Marker descriptors: position,
radius scaled from magnitude, fill color from depth, and popup HTML.
The rendering layer turns Markers into map widgets.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from quakemap.core.depth_scale import get_depth_color
from quakemap.core.earthquake import EarthquakeRecord


# Radius units per unit of magnitude (no clamping)
RADIUS_SCALE = 3

# Circle styling shared by every marker
OUTLINE_COLOR = "#000"
OUTLINE_WEIGHT = 1
OUTLINE_OPACITY = 1
FILL_OPACITY = 0.7


@dataclass(frozen=True)
class Marker:
    """Immutable visual descriptor for one earthquake.

    Attributes:
        latitude: Marker latitude
        longitude: Marker longitude
        radius: Circle radius in pixels (magnitude x RADIUS_SCALE)
        fill_color: Hex fill color from the depth scale
        popup_html: HTML shown when the marker is clicked
    """
    latitude: Any
    longitude: Any
    radius: Any
    fill_color: str
    popup_html: str

    @property
    def location(self) -> list[Any]:
        """Return [latitude, longitude] as expected by map widgets."""
        return [self.latitude, self.longitude]


def get_marker_radius(magnitude: float) -> float:
    """Scale magnitude linearly into a marker radius.

    Pure function. No clamping, so negative magnitudes give negative radii.
    """
    return magnitude * RADIUS_SCALE


def format_value(value: Any) -> str:
    """Format a number the way a browser prints it (4.0 -> "4").

    Pure function. Non-numbers are passed through str().
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_popup(record: EarthquakeRecord) -> str:
    """Format the popup HTML for an earthquake.

    Pure function.

    Args:
        record: Earthquake to describe

    Returns:
        HTML snippet with location, magnitude and depth
    """
    return (
        f"<h3>Location: {record.place}</h3>"
        f"<p>Magnitude: {format_value(record.magnitude)}</p>"
        f"<p>Depth: {format_value(record.depth_km)} km</p>"
    )


def build_marker(record: EarthquakeRecord) -> Marker:
    """Build the Marker for a single earthquake.

    Pure function.
    """
    return Marker(
        latitude=record.latitude,
        longitude=record.longitude,
        radius=get_marker_radius(record.magnitude),
        fill_color=get_depth_color(record.depth_km),
        popup_html=format_popup(record),
    )


def build_markers(records: Iterable[EarthquakeRecord]) -> list[Marker]:
    """Build one Marker per record, preserving order.

    Pure function. No filtering: an empty input gives an empty list.
    """
    return [build_marker(record) for record in records]
