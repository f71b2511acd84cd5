"""
Catalog access.

Modules:
    reader - Eligibility query and document decoding for the products collection
"""

from .reader import (
    ELIGIBILITY_FILTER,
    PROJECTION,
    CatalogReader,
    connect_store,
    decode_document,
)

__all__ = [
    'ELIGIBILITY_FILTER',
    'PROJECTION',
    'CatalogReader',
    'connect_store',
    'decode_document',
]
