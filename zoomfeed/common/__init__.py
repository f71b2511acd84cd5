# Common utilities
from .config_loader import load_config, load_feed_config
from .log_config import setup_logging
from .settings import FeedSettings, load_settings
