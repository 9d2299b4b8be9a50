"""
User configuration management for Shape Gallery.

Supports configuration from multiple sources (in order of priority):
1. Command-line flags (highest priority)
2. Environment variables
3. User config file (~/.shapegallery/config.json)
4. Default values from config.py (lowest priority)

Configuration file location: ~/.shapegallery/config.json

Example config.json:
{
    "public_dir": "/srv/shapes/public",
    "host": "127.0.0.1",
    "port": 5000,
    "log_level": "INFO"
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import DEFAULT_HOST, DEFAULT_PORT, default_public_dir

logger = logging.getLogger(__name__)


class UserConfig:
    """
    Manages user configuration from file and environment variables.

    The config file is read lazily and cached until reload().
    """

    _instance: Optional['UserConfig'] = None
    _config_data: Optional[dict] = None

    def __new__(cls):
        """Singleton pattern to ensure one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('SHAPEGALLERY_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)

        return Path.home() / '.shapegallery'

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Loaded configuration from {self.config_file_path}")
                return data
        except Exception as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def reload(self):
        """Reload configuration from file."""
        self._config_data = None

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """
        Get a configuration value with priority:
        1. Environment variable (if env_var specified)
        2. Config file
        3. Default value

        Args:
            key: Configuration key
            default: Default value if not found
            env_var: Optional environment variable name to check

        Returns:
            Configuration value
        """
        if env_var:
            env_value = os.getenv(env_var)
            if env_value is not None:
                # Try to parse as JSON for numbers/booleans
                try:
                    return json.loads(env_value)
                except (json.JSONDecodeError, TypeError):
                    return env_value

        config_data = self._get_config_data()
        if config_data.get(key) is not None:
            return config_data[key]

        return default

    @property
    def public_dir(self) -> str:
        """Directory containing the shapes folder."""
        return str(self.get(
            'public_dir',
            default=default_public_dir(),
            env_var='SHAPEGALLERY_PUBLIC_DIR'
        ))

    @property
    def host(self) -> str:
        """Interface the web server binds to."""
        return str(self.get('host', default=DEFAULT_HOST, env_var='SHAPEGALLERY_HOST'))

    @property
    def port(self) -> int:
        """Port the web server listens on."""
        return int(self.get('port', default=DEFAULT_PORT, env_var='SHAPEGALLERY_PORT'))

    @property
    def log_level(self) -> str:
        """Logging level name (DEBUG, INFO, WARNING, ERROR)."""
        return str(self.get('log_level', default='INFO', env_var='SHAPEGALLERY_LOG_LEVEL')).upper()

    def create_example_config(self):
        """Create an example configuration file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        example_config = {
            "_comment": "Shape Gallery User Configuration",
            "public_dir": None,
            "host": DEFAULT_HOST,
            "port": DEFAULT_PORT,
            "log_level": "INFO",
        }

        try:
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(example_config, f, indent=2)
            logger.info(f"Created example config file at {self.config_file_path}")
            return True
        except Exception as e:
            logger.error(f"Failed to create example config: {e}")
            return False


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
