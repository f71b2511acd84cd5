"""
Run Settings

Combines environment variables (paths, connection string, API credentials)
with the static feed configuration from config/feed.yaml.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..errors import ConfigError
from .config_loader import load_feed_config

REQUIRED_ENV_VARS = ("ZUNKAPATH", "ZUNKA_SITE_PATH", "ZUNKA_SITE_MONGODB_URI")


@dataclass(frozen=True)
class FeedSettings:
    """Everything a pipeline run needs, passed explicitly through the call chain."""

    mongodb_uri: str
    log_dir: Path
    output_dir: Path

    # Feed
    feed_name: str = "zoom-produtos"
    current_filename: str = "zoom-produtos.xml"
    department: str = "Informática"
    decimal_separator: str = ","
    product_base_url: str = "https://www.zunka.com.br/product/"
    image_base_url: str = "https://www.zunka.com.br/img/"

    # Store
    database: str = "zunka"
    collection: str = "products"
    connect_timeout: float = 10.0
    ping_timeout: float = 2.0
    query_timeout: float = 3.0

    # Marketplace API
    api_base_url: str = "http://merchant.zoom.com.br/api/merchant"
    api_timeout: float = 30.0
    api_user: str = ""
    api_password: str = ""

    @property
    def current_path(self) -> Path:
        return self.output_dir / self.current_filename


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    # An empty section in YAML parses as None
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"feed.yaml section '{name}' must be a mapping")
    return section


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    config: Optional[Dict[str, Any]] = None,
) -> FeedSettings:
    """
    Build FeedSettings from the environment and feed.yaml.

    Args:
        env: Environment mapping (default: os.environ)
        config: Parsed feed config (default: loaded from config/feed.yaml)

    Returns:
        Populated FeedSettings

    Raises:
        ConfigError: If a required environment variable is missing or
            feed.yaml is malformed or a config value has the wrong type
    """
    if env is None:
        env = os.environ
    if config is None:
        try:
            config = load_feed_config()
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed feed.yaml: {e}") from e
    if not isinstance(config, dict):
        raise ConfigError(f"feed.yaml must be a mapping, got {type(config).__name__}")

    missing = [name for name in REQUIRED_ENV_VARS if not env.get(name, "").strip()]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    feed = _section(config, 'feed')
    store = _section(config, 'store')
    api = _section(config, 'api')

    try:
        return FeedSettings(
            mongodb_uri=env["ZUNKA_SITE_MONGODB_URI"],
            log_dir=Path(env["ZUNKAPATH"]) / "log" / "zoom",
            output_dir=Path(env["ZUNKA_SITE_PATH"]) / "dist" / "xml" / "zoom",
            feed_name=feed.get('name', FeedSettings.feed_name),
            current_filename=feed.get('current_filename', FeedSettings.current_filename),
            department=feed.get('department', FeedSettings.department),
            decimal_separator=feed.get('decimal_separator', FeedSettings.decimal_separator),
            product_base_url=feed.get('product_base_url', FeedSettings.product_base_url),
            image_base_url=feed.get('image_base_url', FeedSettings.image_base_url),
            database=store.get('database', FeedSettings.database),
            collection=store.get('collection', FeedSettings.collection),
            connect_timeout=float(store.get('connect_timeout_seconds', FeedSettings.connect_timeout)),
            ping_timeout=float(store.get('ping_timeout_seconds', FeedSettings.ping_timeout)),
            query_timeout=float(store.get('query_timeout_seconds', FeedSettings.query_timeout)),
            api_base_url=api.get('base_url', FeedSettings.api_base_url),
            api_timeout=float(api.get('timeout_seconds', FeedSettings.api_timeout)),
            api_user=env.get("ZOOM_API_USER", ""),
            api_password=env.get("ZOOM_API_PASSWORD", ""),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in feed.yaml: {e}") from e
