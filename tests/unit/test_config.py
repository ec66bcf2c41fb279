"""
Unit tests for configuration management.
"""
import pytest

from src.config import Config


class TestConfig:
    """Test suite for Config class."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        """Remove service settings so defaults apply."""
        for key in ("PORT", "HOST", "STATE_DIR", "DATA_FILE", "ARTICLE_STORAGE_TYPE", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)

    def test_config_initialization(self):
        """Test that Config initializes properly."""
        config = Config()
        assert config is not None

    def test_get_with_default(self):
        """Test get method with default value."""
        config = Config()
        assert config.get("NONEXISTENT_KEY", "default_value") == "default_value"

    def test_defaults(self):
        """Test default values when nothing is configured."""
        config = Config()
        assert config.port == 3001
        assert config.host == "0.0.0.0"
        assert config.state_dir == "state"
        assert config.data_filename == "data.json"
        assert config.storage_type == "local"
        assert config.log_level == "info"

    def test_port_property(self, monkeypatch):
        """Test port property returns integer."""
        monkeypatch.setenv("PORT", "8080")
        config = Config()
        assert config.port == 8080
        assert isinstance(config.port, int)

    def test_empty_port_uses_default(self, monkeypatch):
        """Test that an empty PORT falls back to the default."""
        monkeypatch.setenv("PORT", "")
        assert Config().port == 3001

    def test_storage_settings(self, monkeypatch):
        """Test storage related properties."""
        monkeypatch.setenv("STATE_DIR", "/tmp/articles")
        monkeypatch.setenv("DATA_FILE", "articles.json")
        monkeypatch.setenv("ARTICLE_STORAGE_TYPE", "Tigris")
        config = Config()
        assert config.state_dir == "/tmp/articles"
        assert config.data_filename == "articles.json"
        assert config.storage_type == "tigris"

    def test_log_level_is_lowercased(self, monkeypatch):
        """Test that the log level is normalized for uvicorn."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Config().log_level == "debug"
