"""
Zoom marketplace integration.

Modules:
    api_client - Read-only merchant API client
"""

from .api_client import ZoomAPIClient

__all__ = ['ZoomAPIClient']
