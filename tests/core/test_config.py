"""Tests for configuration models - Pure functions."""

import pytest

from quakemap.core.config import (
    DEFAULT_FEED_URL,
    MapConfig,
    build_feed_url,
)


class TestBuildFeedUrl:
    """Tests for build_feed_url()."""

    def test_default_is_all_week(self):
        assert build_feed_url() == (
            "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_week.geojson"
        )

    def test_named_feed(self):
        assert build_feed_url("2.5", "day").endswith("/2.5_day.geojson")
        assert build_feed_url("significant", "month").endswith("/significant_month.geojson")

    def test_numeric_magnitude_accepted(self):
        """A float from YAML is matched by its string form."""
        assert build_feed_url(4.5, "hour").endswith("/4.5_hour.geojson")

    def test_unknown_magnitude_raises(self):
        with pytest.raises(ValueError, match="magnitude"):
            build_feed_url("3.0", "week")

    def test_unknown_period_raises(self):
        with pytest.raises(ValueError, match="period"):
            build_feed_url("all", "year")


class TestMapConfig:
    """Tests for MapConfig defaults."""

    def test_defaults(self):
        config = MapConfig()
        assert config.feed_url == DEFAULT_FEED_URL
        assert config.center == (0.0, 0.0)
        assert config.zoom == 2
        assert config.layer_name == "Earthquakes"
        assert config.legend_position == "bottomright"
        assert config.request_timeout is None

    def test_tile_defaults_are_openstreetmap(self):
        config = MapConfig()
        assert "openstreetmap" in config.tile_url
        assert "OpenStreetMap" in config.tile_attribution
