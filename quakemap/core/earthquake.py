"""Earthquake records - Pure functions.

This module maps USGS GeoJSON features onto EarthquakeRecord objects.
No validation is performed: every feature yields exactly one record, and
missing fields come through as missing values rather than being dropped.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EarthquakeRecord:
    """Immutable earthquake record as read from the feed.

    Attributes:
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        depth_km: Depth in kilometers (may be negative near the surface)
        magnitude: Event magnitude
        place: Human-readable location description
    """
    latitude: Any
    longitude: Any
    depth_km: Any
    magnitude: Any
    place: Any

    @property
    def coordinates(self) -> tuple[Any, Any]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


def _coordinate(coords: list[Any], index: int) -> Any:
    """Return coords[index], or NaN if the position is absent."""
    if index < len(coords) and coords[index] is not None:
        return coords[index]
    return math.nan


def record_from_feature(feature: dict[str, Any]) -> EarthquakeRecord:
    """Map a single GeoJSON feature onto an EarthquakeRecord.

    Pure function. GeoJSON orders coordinates as [lon, lat, depth].
    A missing magnitude or depth becomes NaN and a missing place becomes None.

    Args:
        feature: GeoJSON feature dict from the USGS feed

    Returns:
        EarthquakeRecord for the feature
    """
    props = feature.get("properties") or {}
    geometry = feature.get("geometry") or {}
    coords = geometry.get("coordinates") or []

    magnitude = props.get("mag")

    return EarthquakeRecord(
        latitude=_coordinate(coords, 1),
        longitude=_coordinate(coords, 0),
        depth_km=_coordinate(coords, 2),
        magnitude=math.nan if magnitude is None else magnitude,
        place=props.get("place"),
    )


def records_from_geojson(geojson: dict[str, Any]) -> list[EarthquakeRecord]:
    """Map a GeoJSON FeatureCollection onto EarthquakeRecords.

    Pure function. Order is preserved and nothing is filtered out.

    Args:
        geojson: Full GeoJSON FeatureCollection

    Returns:
        One EarthquakeRecord per feature, in feed order
    """
    return [record_from_feature(feature) for feature in geojson["features"]]
