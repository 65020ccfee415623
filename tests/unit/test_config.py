"""
Unit tests for configuration management.
"""

import dataclasses
import os
from pathlib import Path

import pytest

from skycategories.config.settings import (
    ClientConfig,
    SkyCategoriesConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)
from skycategories.exceptions import InvalidConfigurationError


class TestDefaultConfig:
    """Test default configuration."""

    def test_default_config_path(self):
        assert get_default_config_path().endswith(os.path.join(".skycategories", "config.yaml"))

    def test_default_config_values(self):
        config = get_default_config()
        assert isinstance(config, SkyCategoriesConfig)
        assert config.client.base_url == "http://localhost:8080"
        assert config.client.timeout == 10
        assert config.client.api_key == ""
        assert config.logging.level == "INFO"
        assert config.logging.format == "console"

    def test_client_config_is_immutable(self):
        config = ClientConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_url = "http://elsewhere"


class TestLoadConfig:
    """Test loading configuration from YAML."""

    def test_missing_file_returns_defaults(self, temp_dir: Path):
        config = load_config(str(temp_dir / "missing.yaml"))
        assert config == get_default_config()

    def test_empty_file_returns_defaults(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == get_default_config()

    def test_load_full_config(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(
            """
client:
  base_url: http://categories:8080
  api_key: secret-key
  token: Bearer abc
  timeout: 5
logging:
  level: DEBUG
  format: json
"""
        )
        config = load_config(str(path))
        assert config.client == ClientConfig(
            base_url="http://categories:8080",
            api_key="secret-key",
            token="Bearer abc",
            timeout=5.0,
        )
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_env_var_expansion(self, temp_dir: Path, monkeypatch):
        monkeypatch.setenv("TEST_SKYCATEGORIES_KEY", "from-env")
        monkeypatch.delenv("TEST_SKYCATEGORIES_URL", raising=False)
        path = temp_dir / "config.yaml"
        path.write_text(
            """
client:
  base_url: ${TEST_SKYCATEGORIES_URL:http://fallback:8080}
  api_key: ${TEST_SKYCATEGORIES_KEY}
"""
        )
        config = load_config(str(path))
        assert config.client.base_url == "http://fallback:8080"
        assert config.client.api_key == "from-env"

    def test_malformed_yaml(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("client: [unclosed")
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))

    def test_non_mapping_top_level(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))

    @pytest.mark.parametrize(
        "content",
        [
            "client:\n  timeout: 0\n",
            "client:\n  timeout: soon\n",
            "client: just-a-string\n",
            "logging:\n  level: LOUD\n",
            "logging:\n  format: xml\n",
        ],
    )
    def test_invalid_values(self, temp_dir: Path, content: str):
        path = temp_dir / "config.yaml"
        path.write_text(content)
        with pytest.raises(InvalidConfigurationError):
            load_config(str(path))
