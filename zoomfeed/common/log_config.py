"""
Logging Configuration

Configures logging for the application.
Output goes to stderr, and optionally to an appending log file so
scheduled runs leave a trail next to the other site logs.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING
        log_file: If given, also append log records to this file
            (parent directories are created)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger("zoomfeed")
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()
    logger.addHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
