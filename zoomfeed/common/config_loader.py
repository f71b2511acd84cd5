"""
Configuration Loader

Loads the YAML feed configuration shipped in config/.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'feed.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_feed_config() -> Dict[str, Any]:
    """
    Load feed configuration.

    Returns:
        Dictionary with 'feed', 'store' and 'api' sections

    Example:
        {
            'feed': {'name': 'zoom-produtos', 'department': 'Informática', ...},
            'store': {'database': 'zunka', 'collection': 'products', ...},
            'api': {'base_url': 'http://merchant.zoom.com.br/api/merchant', ...},
        }
    """
    return load_config('feed.yaml')
