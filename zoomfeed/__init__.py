"""
Zoom Product Feed Exporter

Modules:
    models      - Data models (CatalogRecord, FeedRecord)
    common      - Shared utilities (config loader, logging setup)
    catalog     - MongoDB catalog reader
    feed        - Field derivation, EAN extraction, XML serialization, publishing
    marketplace - Zoom merchant API client
    pipeline    - Run orchestration (connect, read, derive, serialize, publish)
"""

__version__ = "1.2.0"
