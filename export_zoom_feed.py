#!/usr/bin/env python3
"""
Zoom Feed Export

Exports the commercializable catalog to the Zoom XML feed.
Writes a timestamped archive every run and replaces the published
feed only when it changed. Meant to be run by cron.

Usage:
    python3 export_zoom_feed.py
    python3 export_zoom_feed.py --dev --verbose
    python3 export_zoom_feed.py --check-api   # also list what Zoom has for the store

Environment (or .env next to this script):
    ZUNKAPATH, ZUNKA_SITE_PATH, ZUNKA_SITE_MONGODB_URI
    ZOOM_API_USER, ZOOM_API_PASSWORD (only for --check-api)
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from zoomfeed import __version__
from zoomfeed.common.constants import LOG_FILENAME
from zoomfeed.common.log_config import setup_logging
from zoomfeed.common.settings import FeedSettings, load_settings
from zoomfeed.errors import FeedExportError
from zoomfeed.marketplace import ZoomAPIClient
from zoomfeed.pipeline import FeedPipeline

load_dotenv(Path(__file__).parent / ".env")

logger = logging.getLogger("zoomfeed.export")


def check_api(settings: FeedSettings) -> bool:
    """Log how many products Zoom currently lists for the store."""
    try:
        with ZoomAPIClient.from_settings(settings) as client:
            result = client.get_products()
    except FeedExportError as e:
        logger.error("Zoom API check failed: %s", e)
        return False

    products = result.get("products", result) if isinstance(result, dict) else result
    count = len(products) if isinstance(products, list) else "unknown"
    logger.info("Zoom API lists %s products for the store", count)
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Export the product catalog to the Zoom XML feed"
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Development mode (debug logging)"
    )
    parser.add_argument(
        "--check-api",
        action="store_true",
        help="After exporting, list the store's products through the Zoom API"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args(argv)
    verbose = args.verbose or args.dev
    setup_logging(verbose=verbose, quiet=args.quiet)

    try:
        settings = load_settings()
    except (FeedExportError, FileNotFoundError) as e:
        logger.error("Configuration error: %s", e)
        return 1

    log_file = settings.log_dir / LOG_FILENAME
    try:
        setup_logging(verbose=verbose, quiet=args.quiet, log_file=log_file)
    except OSError as e:
        logger.error("Could not open log file %s: %s", log_file, e)
        return 1

    mode = "development" if args.dev else "production"
    logger.info("*** Starting zoom feed export in %s mode (version %s) ***", mode, __version__)

    outcome = FeedPipeline(settings).run()
    if not outcome.succeeded:
        return 1

    if outcome.publish_result and not outcome.publish_result.updated:
        logger.info("Published feed unchanged")

    if args.check_api and not check_api(settings):
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
