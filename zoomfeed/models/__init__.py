"""
Data models for the feed export.

This module contains pure data classes with no business logic.
"""

from .product import CatalogRecord, FeedRecord

__all__ = ['CatalogRecord', 'FeedRecord']
