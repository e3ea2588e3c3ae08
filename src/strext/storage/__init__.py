"""Storage module for strext."""

from strext.storage.config import ConfigStorage, get_config, get_storage, save_config

__all__ = [
    "ConfigStorage",
    "get_storage",
    "get_config",
    "save_config",
]
