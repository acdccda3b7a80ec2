"""HTTP Entry Point.

This module serves the rendered earthquake map over HTTP.
It's a thin wrapper that loads configuration and invokes the pipeline.
"""

import logging
import os
from typing import Any

from flask import Flask

from quakemap.pipeline import build_earthquake_map
from quakemap.shell.config_loader import load_config
from quakemap.shell.map_renderer import render_html


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = Flask(__name__)


@app.route("/")
def earthquake_map() -> tuple[Any, ...]:
    """Fetch the feed and return the map page.

    Each request runs one fetch-and-render cycle; nothing is cached.

    Returns:
        Tuple of (HTML page, 200, headers), or (error dict, 500) on failure
    """
    logger.info("Rendering earthquake map")

    try:
        config = load_config()
        result = build_earthquake_map(config)

        logger.info("Completed: %s", result.summary)

        return render_html(result.map), 200, {"Content-Type": "text/html; charset=utf-8"}

    except Exception as e:
        logger.exception("Unexpected error rendering earthquake map")
        return {
            "status": "error",
            "message": str(e),
        }, 500


# For local testing
if __name__ == "__main__":
    app.run(host="127.0.0.1", port=int(os.environ.get("PORT", "8080")))
