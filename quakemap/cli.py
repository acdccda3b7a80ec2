"""Command line entry point.

Renders the earthquake map to a standalone HTML page.

Usage:
    # Past week, all magnitudes (default feed)
    quakemap

    # Past day, M2.5+, open the result in a browser
    quakemap --magnitude 2.5 --period day --open

    # Render a saved feed instead of fetching
    quakemap --input all_week.geojson --output out/map.html

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import os
import webbrowser

from quakemap.core.config import build_feed_url
from quakemap.pipeline import build_earthquake_map
from quakemap.shell.config_loader import load_config
from quakemap.shell.map_renderer import save_map
from quakemap.shell.usgs_client import load_geojson_file


logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="quakemap",
        description="Render USGS earthquakes on an interactive map, colored by depth.",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config file",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--feed-url",
        help="GeoJSON feed URL to fetch",
    )
    source.add_argument(
        "--input",
        help="Read a saved GeoJSON file instead of fetching",
    )

    parser.add_argument(
        "--magnitude",
        help="USGS summary feed magnitude (significant, 4.5, 2.5, 1.0, all)",
    )
    parser.add_argument(
        "--period",
        help="USGS summary feed period (hour, day, week, month)",
    )
    parser.add_argument(
        "--output",
        help="Output HTML path",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open the rendered map in a web browser",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns a process exit code."""
    _configure_logging()
    args = build_parser().parse_args(argv)

    config = load_config(args.config)

    if args.feed_url:
        config.feed_url = args.feed_url
    elif args.magnitude or args.period:
        config.feed_url = build_feed_url(
            magnitude=args.magnitude or "all",
            period=args.period or "week",
        )

    if args.output:
        config.output_path = args.output

    geojson = load_geojson_file(args.input) if args.input else None

    result = build_earthquake_map(config, geojson=geojson)
    path = save_map(result.map, config.output_path)

    logger.info("%s -> %s", result.summary, path)

    if args.open:
        webbrowser.open(path.resolve().as_uri())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
