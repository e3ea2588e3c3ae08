"""Configuration models for strext."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from strext.text.truncation import MIN_ELLIPSIS_LENGTH


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Config(BaseModel):
    """Settings for the strext command line."""

    version: str = "1.0.0"

    # Used by truncate/ellipsis when --max-length is omitted
    default_max_length: int = Field(default=80, ge=MIN_ELLIPSIS_LENGTH)

    log_level: LogLevel = LogLevel.INFO
    log_file: Optional[str] = None
