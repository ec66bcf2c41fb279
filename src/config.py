"""
Configuration management for the article service.
Loads environment variables and provides access to configuration settings.
"""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Configuration settings loaded from environment variables."""

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key name
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return os.getenv(key, default)

    @property
    def port(self) -> int:
        """Get HTTP server port."""
        return int(os.getenv("PORT") or "3001")

    @property
    def host(self) -> str:
        """Get HTTP server host."""
        return os.getenv("HOST", "0.0.0.0")

    @property
    def state_dir(self) -> str:
        """Get the directory holding the data file."""
        return os.getenv("STATE_DIR", "state")

    @property
    def data_filename(self) -> str:
        """Get the name of the data file."""
        return os.getenv("DATA_FILE", "data.json")

    @property
    def storage_type(self) -> str:
        """Get the storage backend type ('local' or 'tigris')."""
        return os.getenv("ARTICLE_STORAGE_TYPE", "local").lower()

    @property
    def log_level(self) -> str:
        """Get the log level name used by the server."""
        return os.getenv("LOG_LEVEL", "info").lower()
