"""Shared fixtures for strext tests."""

import logging

import pytest
from rich.logging import RichHandler

from strext.storage import config as config_module
from strext.storage.config import ConfigStorage
from strext.utils import logging as logging_module


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and log files inside tmp_path."""
    storage = ConfigStorage(tmp_path / "config" / "config.yaml")
    monkeypatch.setattr(config_module, "_storage", storage)
    monkeypatch.setattr(logging_module, "DEFAULT_LOG_DIR", tmp_path / "logs")

    yield storage

    # Drop handlers installed by setup_logging
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
