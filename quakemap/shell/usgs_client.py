"""USGS Feed Client - Imperative Shell.

This module handles reading the USGS GeoJSON summary feed over HTTP,
or a saved copy of it from disk. All I/O is contained here; mapping
features to records is in the core module.
"""

import json
import logging
from pathlib import Path
from typing import Any

import requests

from quakemap.core.config import DEFAULT_FEED_URL


logger = logging.getLogger(__name__)


class USGSFeedClient:
    """Client for fetching the earthquake feed.

    This is part of the imperative shell - it handles HTTP I/O.
    A single GET is issued per fetch: no retry, no pagination.
    """

    def __init__(
        self,
        feed_url: str = DEFAULT_FEED_URL,
        timeout: float | None = None,
    ) -> None:
        """Initialize feed client.

        Args:
            feed_url: GeoJSON feed URL
            timeout: Request timeout in seconds (None waits forever)
        """
        self.feed_url = feed_url
        self.timeout = timeout

    def fetch_feed(self) -> dict[str, Any]:
        """Fetch the earthquake feed.

        This method performs HTTP I/O.

        Returns:
            Parsed GeoJSON FeatureCollection

        Raises:
            requests.RequestException: If the request fails
            ValueError: If the body is not JSON
        """
        logger.info("Fetching earthquake feed from %s", self.feed_url)

        response = requests.get(self.feed_url, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()

        logger.info(
            "Fetched %d features from feed",
            len(data.get("features", [])),
        )

        return data


def load_geojson_file(path: str | Path) -> dict[str, Any]:
    """Read a saved GeoJSON document from disk.

    This function performs file I/O.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    logger.info("Loading earthquake feed from %s", path)

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
