"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The MapConfig model is defined in quakemap/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quakemap.core.config import MapConfig, build_feed_url


logger = logging.getLogger(__name__)


# Environment variable -> (MapConfig field, converter)
ENV_OVERRIDES = {
    "FEED_URL": ("feed_url", str),
    "TILE_URL": ("tile_url", str),
    "MAP_OUTPUT_PATH": ("output_path", str),
    "MAP_ZOOM": ("zoom", int),
    "REQUEST_TIMEOUT": ("request_timeout", float),
}


def _parse_center(data: Any) -> tuple[float, float]:
    """Parse a map center from [lat, lon] or {latitude, longitude}."""
    if isinstance(data, dict):
        return (float(data["latitude"]), float(data["longitude"]))
    lat, lon = data
    return (float(lat), float(lon))


def _parse_feed_url(data: dict[str, Any]) -> str | None:
    """Resolve the feed URL from either feed_url or a feed {magnitude, period} block."""
    if "feed_url" in data:
        return data["feed_url"]

    feed = data.get("feed")
    if feed:
        return build_feed_url(
            magnitude=str(feed.get("magnitude", "all")),
            period=feed.get("period", "week"),
        )
    return None


def load_config_from_dict(data: dict[str, Any]) -> MapConfig:
    """Load configuration from a dictionary.

    Pure function. Missing keys keep their MapConfig defaults and
    unknown keys are ignored.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed MapConfig object

    Raises:
        ValueError: If a feed block names an unknown feed
    """
    kwargs: dict[str, Any] = {}

    feed_url = _parse_feed_url(data)
    if feed_url is not None:
        kwargs["feed_url"] = feed_url

    for key in ("tile_url", "tile_attribution", "layer_name",
                "legend_title", "legend_position", "output_path"):
        if key in data:
            kwargs[key] = str(data[key])

    if "center" in data:
        kwargs["center"] = _parse_center(data["center"])

    if "zoom" in data:
        kwargs["zoom"] = int(data["zoom"])

    if data.get("request_timeout") is not None:
        kwargs["request_timeout"] = float(data["request_timeout"])

    return MapConfig(**kwargs)


def apply_env_overrides(config: MapConfig) -> MapConfig:
    """Override config fields from environment variables.

    Environment variables:
        FEED_URL: GeoJSON feed URL
        TILE_URL: Base layer tile URL template
        MAP_OUTPUT_PATH: Output HTML path
        MAP_ZOOM: Initial zoom level
        REQUEST_TIMEOUT: Fetch timeout in seconds

    Returns:
        The same config object, updated in place
    """
    for env_var, (field_name, convert) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            logger.debug("Overriding %s from %s", field_name, env_var)
            setattr(config, field_name, convert(value))
    return config


def load_config(config_path: str | Path | None = None) -> MapConfig:
    """Load configuration from a YAML file, then apply env overrides.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed MapConfig object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return apply_env_overrides(MapConfig())

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return apply_env_overrides(MapConfig())

    config = apply_env_overrides(load_config_from_dict(data))

    logger.info("Loaded config: feed %s, zoom %d", config.feed_url, config.zoom)

    return config
