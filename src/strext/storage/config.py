"""Configuration storage and management for strext."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from strext.models.config import Config
from strext.utils.logging import get_logger

logger = get_logger(__name__)

# Default config directory
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "strext"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"


class ConfigStorage:
    """Configuration storage manager."""

    def __init__(self, config_path: Path | None = None):
        """Initialize config storage.

        Args:
            config_path: Custom config file path.
        """
        self.config_path = config_path or DEFAULT_CONFIG_FILE
        self._config: Config | None = None

    def load(self) -> Config:
        """Load configuration from file.

        A missing, unreadable or invalid file yields the defaults.

        Returns:
            Config object.
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            self._config = Config()
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            self._config = Config(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring invalid config at {self.config_path}: {e}")
            self._config = Config()

        return self._config

    def save(self, config: Config | None = None) -> None:
        """Save configuration to file.

        Args:
            config: Config to save. Uses current config if not provided.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if config is not None:
            self._config = config

        if self._config is None:
            self._config = Config()

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self._config.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def reset(self) -> Config:
        """Reset to default configuration.

        Returns:
            Default Config object.
        """
        self._config = Config()
        self.save()
        return self._config


# Global config storage instance
_storage: ConfigStorage | None = None


def get_storage() -> ConfigStorage:
    """Get global config storage instance."""
    global _storage
    if _storage is None:
        _storage = ConfigStorage()
    return _storage


def get_config() -> Config:
    """Get current configuration."""
    return get_storage().load()


def save_config(config: Config) -> None:
    """Save configuration.

    Args:
        config: Config to save.
    """
    get_storage().save(config)
