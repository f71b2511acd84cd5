"""Tests for zoomfeed/common/settings.py"""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from zoomfeed.common.settings import FeedSettings, load_settings
from zoomfeed.errors import ConfigError


@pytest.fixture
def env():
    return {
        "ZUNKAPATH": "/var/zunka",
        "ZUNKA_SITE_PATH": "/var/zunka/site",
        "ZUNKA_SITE_MONGODB_URI": "mongodb://localhost:27017/zunka",
    }


class TestLoadSettings:
    def test_paths_from_environment(self, env):
        settings = load_settings(env=env, config={})
        assert settings.log_dir == Path("/var/zunka/log/zoom")
        assert settings.output_dir == Path("/var/zunka/site/dist/xml/zoom")
        assert settings.current_path == Path("/var/zunka/site/dist/xml/zoom/zoom-produtos.xml")
        assert settings.mongodb_uri == "mongodb://localhost:27017/zunka"

    def test_defaults_without_config(self, env):
        settings = load_settings(env=env, config={})
        assert settings.department == "Informática"
        assert settings.query_timeout == 3.0
        assert settings.api_user == ""

    def test_config_overrides(self, env):
        config = {
            "feed": {"decimal_separator": ".", "department": "Games"},
            "store": {"query_timeout_seconds": 30},
            "api": {"base_url": "https://sandbox.example.com/api"},
        }
        settings = load_settings(env=env, config=config)
        assert settings.decimal_separator == "."
        assert settings.department == "Games"
        assert settings.query_timeout == 30.0
        assert settings.api_base_url == "https://sandbox.example.com/api"

    def test_api_credentials_from_environment(self, env):
        env.update({"ZOOM_API_USER": "zunka", "ZOOM_API_PASSWORD": "secret"})
        settings = load_settings(env=env, config={})
        assert settings.api_user == "zunka"
        assert settings.api_password == "secret"

    @pytest.mark.parametrize("missing", ["ZUNKAPATH", "ZUNKA_SITE_PATH", "ZUNKA_SITE_MONGODB_URI"])
    def test_missing_required_variable(self, env, missing):
        del env[missing]
        with pytest.raises(ConfigError, match=missing):
            load_settings(env=env, config={})

    def test_blank_variable_counts_as_missing(self, env):
        env["ZUNKAPATH"] = "   "
        with pytest.raises(ConfigError, match="ZUNKAPATH"):
            load_settings(env=env, config={})

    def test_invalid_timeout(self, env):
        with pytest.raises(ConfigError, match="feed.yaml"):
            load_settings(env=env, config={"store": {"query_timeout_seconds": "soon"}})

    def test_loads_repo_config_by_default(self, env):
        settings = load_settings(env=env)
        assert isinstance(settings, FeedSettings)
        assert settings.current_filename == "zoom-produtos.xml"


class TestMalformedConfig:
    def test_yaml_syntax_error(self, env):
        with patch("zoomfeed.common.settings.load_feed_config", side_effect=yaml.YAMLError("bad indent")):
            with pytest.raises(ConfigError, match="Malformed feed.yaml"):
                load_settings(env=env)

    def test_top_level_must_be_mapping(self, env):
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(env=env, config=["feed"])

    def test_section_must_be_mapping(self, env):
        with pytest.raises(ConfigError, match="'store'"):
            load_settings(env=env, config={"store": "localhost"})

    def test_empty_section_uses_defaults(self, env):
        settings = load_settings(env=env, config={"feed": None})
        assert settings.decimal_separator == ","
