"""
Zoom Merchant API Client

Read-only client for the Zoom merchant API, used to check what the
marketplace currently lists for the store after a feed is published.
Feed delivery itself is file based; nothing is pushed through the API.
"""

import logging
from typing import Any, Dict
from urllib.parse import urljoin

import requests

from ..common.settings import FeedSettings
from ..errors import ConfigError, MarketplaceAPIError

logger = logging.getLogger(__name__)


class ZoomAPIClient:
    """
    Client for the Zoom merchant API (HTTP basic auth).

    Usage:
        with ZoomAPIClient.from_settings(settings) as client:
            products = client.get_products()
    """

    DEFAULT_BASE_URL = "http://merchant.zoom.com.br/api/merchant"

    def __init__(
        self,
        username: str,
        password: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ):
        """
        Initialize the API client.

        Args:
            username: Merchant API user
            password: Merchant API password
            base_url: API root (no trailing slash needed)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    @classmethod
    def from_settings(cls, settings: FeedSettings) -> "ZoomAPIClient":
        """
        Raises:
            ConfigError: If ZOOM_API_USER / ZOOM_API_PASSWORD are not set
        """
        if not settings.api_user or not settings.api_password:
            raise ConfigError("ZOOM_API_USER and ZOOM_API_PASSWORD are required for API access")
        return cls(
            settings.api_user,
            settings.api_password,
            base_url=settings.api_base_url,
            timeout=settings.api_timeout,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def get(self, endpoint: str) -> Any:
        """
        GET an endpoint and return its JSON body.

        Raises:
            MarketplaceAPIError: On transport failure, non-200 status or a non-JSON body
        """
        url = urljoin(self.base_url + "/", endpoint)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise MarketplaceAPIError(f"Request timeout: {url}") from e
        except requests.exceptions.RequestException as e:
            raise MarketplaceAPIError(f"Request failed: {e}") from e

        if response.status_code != 200:
            body = response.text[:500]
            raise MarketplaceAPIError(
                f"Zoom API returned HTTP {response.status_code} for {endpoint}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MarketplaceAPIError(
                f"Zoom API returned invalid JSON for {endpoint}",
                status_code=response.status_code,
                body=response.text[:500],
            ) from e

    def get_products(self) -> Dict[str, Any]:
        """List the store's products as Zoom currently sees them."""
        result = self.get("products")
        logger.debug("Zoom products response: %s", result)
        return result
