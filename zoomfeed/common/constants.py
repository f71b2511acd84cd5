"""
Shared constants for the project.

This module contains feed-wide constants that should have a single source of truth.
"""

# Zoom always advertises three interest-free installments
INSTALLMENT_COUNT = 3

# Archive suffix, minute granularity (e.g. zoom-produtos-2024-03-09-1415.xml)
ARCHIVE_TIMESTAMP_FORMAT = "%Y-%m-%d-%H%M"

LOG_FILENAME = "zoom-feed.log"
