"""Data models for strext."""

from strext.models.config import Config, LogLevel

__all__ = ["Config", "LogLevel"]
