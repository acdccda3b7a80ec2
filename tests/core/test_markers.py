"""Tests for marker building - Pure functions.

These are fast unit tests with no mocks needed since they test pure functions.
"""

import math

import pytest

from quakemap.core.depth_scale import VIRIDIS
from quakemap.core.earthquake import EarthquakeRecord
from quakemap.core.markers import (
    Marker,
    build_marker,
    build_markers,
    format_popup,
    format_value,
    get_marker_radius,
)


@pytest.fixture
def bay_area_record():
    """Create a sample shallow earthquake."""
    return EarthquakeRecord(
        latitude=37.8,
        longitude=-122.4,
        depth_km=5,
        magnitude=4.0,
        place="Bay Area",
    )


class TestGetMarkerRadius:
    """Tests for get_marker_radius()."""

    def test_scales_by_three(self):
        """Radius is magnitude times three."""
        assert get_marker_radius(4.0) == 12.0
        assert get_marker_radius(1.5) == 4.5

    def test_no_clamping(self):
        """Large magnitudes are not capped."""
        assert get_marker_radius(10) == 30

    def test_negative_magnitude_gives_negative_radius(self):
        """Negative magnitudes pass straight through."""
        assert get_marker_radius(-0.5) == -1.5

    def test_nan_magnitude_gives_nan_radius(self):
        """Missing magnitudes propagate as NaN."""
        assert math.isnan(get_marker_radius(math.nan))


class TestFormatValue:
    """Tests for format_value()."""

    def test_whole_float_drops_decimal(self):
        assert format_value(4.0) == "4"

    def test_fraction_is_kept(self):
        assert format_value(4.25) == "4.25"

    def test_int_unchanged(self):
        assert format_value(5) == "5"

    def test_none_and_nan(self):
        assert format_value(None) == "None"
        assert format_value(math.nan) == "nan"


class TestFormatPopup:
    """Tests for format_popup()."""

    def test_contains_place_magnitude_depth(self, bay_area_record):
        """Popup shows place, magnitude and depth in km."""
        popup = format_popup(bay_area_record)
        assert "Location: Bay Area" in popup
        assert "Magnitude: 4" in popup
        assert "Depth: 5 km" in popup

    def test_missing_place_is_printed(self):
        """A missing place is shown rather than hidden."""
        record = EarthquakeRecord(0, 0, 10.0, 2.0, None)
        assert "Location: None" in format_popup(record)


class TestBuildMarker:
    """Tests for build_marker()."""

    def test_bay_area_marker(self, bay_area_record):
        """Marker for the sample record matches expected descriptor."""
        marker = build_marker(bay_area_record)

        assert marker.latitude == 37.8
        assert marker.longitude == -122.4
        assert marker.radius == 12.0
        assert marker.fill_color == VIRIDIS[0]
        assert "Bay Area" in marker.popup_html
        assert "4" in marker.popup_html
        assert "5 km" in marker.popup_html

    def test_location_is_lat_lon(self, bay_area_record):
        """Marker location is [lat, lon]."""
        assert build_marker(bay_area_record).location == [37.8, -122.4]

    def test_deep_event_color(self):
        """Deep events take the last palette color."""
        record = EarthquakeRecord(0, 0, 300.0, 6.1, "Deep")
        assert build_marker(record).fill_color == VIRIDIS[5]

    def test_missing_fields_still_build(self):
        """NaN magnitude and depth give a degenerate but valid marker."""
        record = EarthquakeRecord(1.0, 2.0, math.nan, math.nan, None)
        marker = build_marker(record)
        assert math.isnan(marker.radius)
        assert marker.fill_color == VIRIDIS[5]

    def test_marker_is_immutable(self, bay_area_record):
        """Marker is frozen."""
        marker = build_marker(bay_area_record)
        with pytest.raises(AttributeError):
            marker.radius = 1


class TestBuildMarkers:
    """Tests for build_markers()."""

    def test_empty_input(self):
        """No records gives no markers."""
        assert build_markers([]) == []

    def test_one_marker_per_record_in_order(self):
        """Output length and order follow the input."""
        records = [
            EarthquakeRecord(0, 0, depth, mag, f"Q{i}")
            for i, (depth, mag) in enumerate([(5, 1.0), (45, 2.0), (95, 3.0)])
        ]
        markers = build_markers(records)

        assert len(markers) == 3
        assert [m.radius for m in markers] == [3.0, 6.0, 9.0]
        assert [m.fill_color for m in markers] == [VIRIDIS[0], VIRIDIS[2], VIRIDIS[5]]

    def test_accepts_generators(self, bay_area_record):
        """Any iterable of records is accepted."""
        markers = build_markers(r for r in [bay_area_record])
        assert len(markers) == 1

    def test_is_deterministic(self, bay_area_record):
        """Same records always give identical markers."""
        assert build_markers([bay_area_record]) == build_markers([bay_area_record])
        assert isinstance(build_markers([bay_area_record])[0], Marker)
