"""
Zoom feed generation.

Modules:
    ean        - EAN recovery from technical information text
    deriver    - CatalogRecord -> FeedRecord field derivation
    serializer - Zoom XML document rendering
    publisher  - Archive + change-only publication of the current feed
"""

from .deriver import FieldDeriver, format_price, installment_value
from .ean import extract_ean
from .publisher import FeedPublisher, PublishResult
from .serializer import FEED_ELEMENTS, FEED_SCHEMA, FeedSerializer

__all__ = [
    'FieldDeriver',
    'format_price',
    'installment_value',
    'extract_ean',
    'FeedPublisher',
    'PublishResult',
    'FEED_ELEMENTS',
    'FEED_SCHEMA',
    'FeedSerializer',
]
